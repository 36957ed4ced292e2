"""
Unit tests for the practice quiz engine.
"""
import unittest

from quadratic_app.core.models import Question
from quadratic_app.core.question_bank import DEFAULT_QUESTIONS
from quadratic_app.core.quiz_engine import (
    CORRECT_PREFIX,
    INCORRECT_PREFIX,
    OptionFeedback,
    QuizEngine,
    QuizState,
)


class TestQuizEngine(unittest.TestCase):
    """Test cases for answer tracking, scoring and feedback."""

    def setUp(self):
        self.engine = QuizEngine(DEFAULT_QUESTIONS)

    def test_initial_state(self):
        self.assertEqual(self.engine.get_state(), QuizState.UNANSWERED)
        self.assertEqual(self.engine.get_question_count(), len(DEFAULT_QUESTIONS))
        self.assertEqual(self.engine.get_score_text(), "")

    def test_select_option_overwrites(self):
        self.engine.select_option(1, 0)
        self.engine.select_option(1, 1)

        self.assertEqual(self.engine.get_selected_option(1), 1)
        self.assertEqual(self.engine.get_answers(), {1: 1})
        self.assertEqual(self.engine.get_state(), QuizState.ANSWERED)

    def test_select_option_rejects_unknown_question(self):
        with self.assertRaises(KeyError):
            self.engine.select_option(99, 0)

    def test_select_option_rejects_out_of_range_option(self):
        with self.assertRaises(IndexError):
            self.engine.select_option(1, 4)

    def test_score_counts_correct_answers(self):
        self.engine.select_option(1, 1)
        self.engine.select_option(2, 1)
        self.engine.select_option(3, 0)
        self.engine.check_answers()

        self.assertEqual(self.engine.get_score(), 2)
        self.assertEqual(self.engine.get_score_text(), f"Score: 2 / {len(DEFAULT_QUESTIONS)}")
        self.assertEqual(self.engine.get_state(), QuizState.SUBMITTED)

    def test_submit_without_answers(self):
        self.engine.check_answers()

        self.assertEqual(self.engine.get_score(), 0)
        self.assertEqual(self.engine.get_score_text(), f"Score: 0 / {len(DEFAULT_QUESTIONS)}")
        for question in self.engine.questions:
            for index in range(len(question.options)):
                expected = (
                    OptionFeedback.CORRECT
                    if index == question.correct_option_index
                    else OptionFeedback.NEUTRAL
                )
                self.assertEqual(self.engine.get_option_feedback(question.id, index), expected)
            explanation = self.engine.get_explanation_feedback(question.id)
            self.assertFalse(explanation.is_correct)
            self.assertTrue(explanation.text.startswith(INCORRECT_PREFIX))

    def test_feedback_hidden_before_check(self):
        self.engine.select_option(1, 0)

        self.assertEqual(self.engine.get_option_feedback(1, 0), OptionFeedback.NEUTRAL)
        self.assertEqual(self.engine.get_option_feedback(1, 1), OptionFeedback.NEUTRAL)
        self.assertIsNone(self.engine.get_explanation_feedback(1))

    def test_wrong_selection_marked_incorrect(self):
        self.engine.select_option(3, 0)
        self.engine.check_answers()

        self.assertEqual(self.engine.get_option_feedback(3, 0), OptionFeedback.INCORRECT)
        self.assertEqual(self.engine.get_option_feedback(3, 1), OptionFeedback.CORRECT)
        self.assertEqual(self.engine.get_option_feedback(3, 2), OptionFeedback.NEUTRAL)

    def test_correct_explanation_prefix(self):
        self.engine.select_option(3, 1)
        self.engine.check_answers()

        explanation = self.engine.get_explanation_feedback(3)
        self.assertTrue(explanation.is_correct)
        self.assertEqual(explanation.text, CORRECT_PREFIX + DEFAULT_QUESTIONS[2].explanation)

    def test_changing_answer_after_check_updates_feedback(self):
        self.engine.select_option(3, 0)
        self.engine.check_answers()
        self.engine.select_option(3, 1)

        self.assertEqual(self.engine.get_option_feedback(3, 0), OptionFeedback.NEUTRAL)
        self.assertEqual(self.engine.get_score(), 1)

    def test_reset(self):
        self.engine.select_option(1, 1)
        self.engine.check_answers()
        self.engine.reset()

        self.assertEqual(self.engine.get_answers(), {})
        self.assertFalse(self.engine.is_submitted())
        self.assertEqual(self.engine.get_state(), QuizState.UNANSWERED)
        self.assertEqual(self.engine.get_score_text(), "")
        self.assertEqual(self.engine.get_option_feedback(1, 1), OptionFeedback.NEUTRAL)

    def test_duplicate_ids_rejected(self):
        question = Question(id=1, prompt="p", options=("x", "y"), correct_option_index=0)
        with self.assertRaises(ValueError):
            QuizEngine([question, question])


class TestQuestionModel(unittest.TestCase):

    def test_invalid_correct_index(self):
        with self.assertRaises(ValueError):
            Question(id=1, prompt="p", options=("x", "y"), correct_option_index=2)

    def test_too_few_options(self):
        with self.assertRaises(ValueError):
            Question(id=1, prompt="p", options=("x",), correct_option_index=0)

    def test_empty_prompt(self):
        with self.assertRaises(ValueError):
            Question(id=1, prompt="  ", options=("x", "y"), correct_option_index=0)

    def test_default_bank_is_well_formed(self):
        self.assertEqual([q.id for q in DEFAULT_QUESTIONS], list(range(1, len(DEFAULT_QUESTIONS) + 1)))
        for question in DEFAULT_QUESTIONS:
            self.assertEqual(len(set(question.options)), len(question.options))
            self.assertTrue(question.explanation)


if __name__ == "__main__":
    unittest.main()
