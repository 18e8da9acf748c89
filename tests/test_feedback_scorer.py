import unittest

from packages.mip_dto.interview import Answer, Question
from packages.mip_feedback import FeedbackScorer, round_half_up, score
from packages.mip_feedback.rules import DEFAULT_SUGGESTION, HIGH_SCORE_SUGGESTION, LOW_SCORE_PREFIX

TEN_KEYWORDS = [f"k{i}" for i in range(10)]


def _single(keywords, text, question_id="q1"):
    questions = [Question(id=question_id, text="Q?", keywords=keywords)]
    return score(questions, [Answer(question_id=question_id, text=text)])[0]


class TestFeedbackScorer(unittest.TestCase):
    def test_partial_match(self):
        feedback = _single(["hooks", "state", "props"], "I used hooks and managed state carefully.")
        self.assertEqual(feedback.matched_keywords, ["hooks", "state"])
        self.assertEqual(feedback.score, 4)
        self.assertEqual(feedback.suggestions, "Good answer, but you could strengthen it by mentioning: props")

    def test_empty_keywords_give_default(self):
        feedback = _single([], "Anything at all")
        self.assertEqual(feedback.score, 3)
        self.assertEqual(feedback.matched_keywords, [])
        self.assertEqual(feedback.suggestions, DEFAULT_SUGGESTION)

    def test_no_match(self):
        feedback = _single(["a", "b", "c", "d"], "xyz")
        self.assertEqual(feedback.score, 1)
        self.assertEqual(feedback.matched_keywords, [])
        self.assertEqual(
            feedback.suggestions,
            "Your answer could be improved significantly. Consider addressing these keywords: a, b, c",
        )

    def test_low_tier_with_fewer_than_three_unmatched(self):
        two = _single(["a", "b"], "xyz")
        self.assertEqual(two.score, 1)
        self.assertEqual(two.suggestions, LOW_SCORE_PREFIX + "a, b")

        one = _single(["a"], "xyz")
        self.assertEqual(one.score, 1)
        self.assertEqual(one.suggestions, LOW_SCORE_PREFIX + "a")

    def test_mid_tier_with_single_unmatched(self):
        feedback = _single(["alpha", "beta"], "alpha")
        self.assertEqual(feedback.score, 4)
        self.assertEqual(feedback.matched_keywords, ["alpha"])
        self.assertEqual(feedback.suggestions, "Good answer, but you could strengthen it by mentioning: beta")

    def test_full_match(self):
        feedback = _single(["hooks", "state", "props"], "Hooks, STATE and props.")
        self.assertEqual(feedback.score, 5)
        self.assertEqual(feedback.suggestions, HIGH_SCORE_SUGGESTION)

    def test_empty_answer_scores_one(self):
        self.assertEqual(_single(["hooks"], "").score, 1)

    def test_unknown_question_gives_default(self):
        questions = [Question(id="q1", text="Q?", keywords=["hooks"])]
        feedback = score(questions, [Answer(question_id="missing", text="hooks")])[0]
        self.assertEqual(feedback.question_id, "missing")
        self.assertEqual(feedback.score, 3)
        self.assertEqual(feedback.suggestions, DEFAULT_SUGGESTION)

    def test_case_insensitive_multiword_keyword(self):
        feedback = _single(["virtual DOM", "jsx"], "The Virtual dom diffing is neat")
        self.assertEqual(feedback.matched_keywords, ["virtual DOM"])

    def test_matched_keywords_keep_question_order(self):
        feedback = _single(["c", "a", "b"], "b then a then c")
        self.assertEqual(feedback.matched_keywords, ["c", "a", "b"])

    def test_half_ratios_round_up(self):
        """
        1/10 -> 0.5 -> 1 -> score 2 and 5/10 -> 2.5 -> 3 -> score 4.
        Banker's rounding would give 1 and 3.
        """
        self.assertEqual(_single(TEN_KEYWORDS, "k0").score, 2)
        self.assertEqual(_single(TEN_KEYWORDS, "k0 k1 k2 k3 k4").score, 4)

    def test_low_tier_lists_three_unmatched(self):
        feedback = _single(TEN_KEYWORDS, "k1")
        self.assertEqual(feedback.suggestions.split(": ", 1)[1], "k0, k2, k3")

    def test_one_feedback_per_answer_in_answer_order(self):
        questions = [
            Question(id="q1", text="Q1", keywords=["alpha"]),
            Question(id="q2", text="Q2", keywords=["beta"]),
        ]
        answers = [Answer(question_id="q2", text="beta"), Answer(question_id="q1", text="none")]
        result = FeedbackScorer().score(questions, answers)
        self.assertEqual([f.question_id for f in result], ["q2", "q1"])
        self.assertEqual([f.score for f in result], [5, 1])

    def test_scores_are_bounded_and_matches_are_subsets(self):
        keywords = ["api", "server", "middleware", "database", "index"]
        texts = ["", "api", "api server", "api server database", "an index of api server middleware database"]
        for text in texts:
            feedback = _single(keywords, text)
            self.assertIn(feedback.score, {1, 2, 3, 4, 5})
            self.assertTrue(set(feedback.matched_keywords) <= set(keywords))

    def test_scoring_is_deterministic(self):
        questions = [Question(id="q1", text="Q", keywords=["a", "b"])]
        answers = [Answer(question_id="q1", text="a")]
        self.assertEqual(score(questions, answers), score(questions, answers))

    def test_round_half_up(self):
        self.assertEqual(round_half_up(0.5), 1)
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(3.33), 3)
        self.assertEqual(round_half_up(0.0), 0)


if __name__ == "__main__":
    unittest.main()
