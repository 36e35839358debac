"""
Tests for score aggregation.
"""

from essay_grader.evaluation.grader import EssayGrader, FeedbackMessage
from essay_grader.evaluation.models import EssayContent


def aggregate(content_data, text):
    content = EssayContent.from_dict(content_data)
    return EssayGrader().aggregate(content.keyword_groups, text, content.behaviour)


class TestEssayGrader:
    """Test cases for EssayGrader.aggregate."""

    def test_sums_points_in_group_order(self, make_group, make_content):
        data = make_content([
            make_group('dog', points=2, found='dog found'),
            make_group('cat', points=3, missed='cat missed'),
            make_group('bird', points=4, found='bird found'),
        ])
        result = aggregate(data, "a dog and a bird")
        assert result.raw_score == 6
        assert result.messages == (
            FeedbackMessage('dog found', True),
            FeedbackMessage('cat missed', False),
            FeedbackMessage('bird found', True),
        )

    def test_group_counts_once_for_several_matching_alternatives(self, make_group, make_content):
        data = make_content([make_group('dog', 'puppy', 'hound', points=5, found='Found dog')])
        result = aggregate(data, "dog puppy hound")
        assert result.raw_score == 5
        assert len(result.messages) == 1

    def test_found_and_missed_never_both(self, make_group, make_content):
        data = make_content([make_group('dog', points=1, found='yes', missed='no')])
        assert aggregate(data, "dog").messages == (FeedbackMessage('yes', True),)
        assert aggregate(data, "cat").messages == (FeedbackMessage('no', False),)

    def test_unset_messages_are_omitted(self, make_group, make_content):
        data = make_content([make_group('dog', points=1)])
        assert aggregate(data, "dog").messages == ()
        assert aggregate(data, "cat").messages == ()

    def test_no_groups(self):
        result = aggregate({}, "anything at all")
        assert result.raw_score == 0
        assert result.messages == ()

    def test_score_bounded_by_total_points(self, make_group, make_content):
        data = make_content([
            make_group('a', 'b', points=2),
            make_group('b', 'c', points=3),
        ])
        content = EssayContent.from_dict(data)
        for text in ["", "a", "b", "a b c", "c c c", "x"]:
            result = aggregate(data, text)
            assert 0 <= result.raw_score <= content.max_points

    def test_idempotent(self, make_group, make_content):
        data = make_content([make_group('dog', points=2, found='dog found', forgive_mistakes=True)])
        assert aggregate(data, "a dogg") == aggregate(data, "a dogg")

    def test_records_group_matches(self, make_group, make_content):
        data = make_content([make_group('dog', points=2), make_group('cat', points=1)])
        result = aggregate(data, "dog")
        assert [m.found for m in result.group_matches] == [True, False]

    def test_to_dict(self, make_group, make_content):
        data = make_content([make_group('dog', points=2, found='Found')])
        assert aggregate(data, "dog").to_dict() == {
            'raw_score': 2,
            'messages': [{'message': 'Found', 'found': True}],
        }
