import unittest

from packages.mip_dto.interview import InterviewSetup
from packages.mip_qgen import DEFAULT_KEYWORDS, QuestionGenerator, build_keyword_dictionary, generate


class TestQuestionGenerator(unittest.TestCase):
    def test_backend_developer_setup(self):
        """
        Node + Database stack:
        1. Two tech questions followed by the four fixed slots.
        2. Tech keywords come from the dictionary.
        """
        setup = InterviewSetup(job_title="Backend Developer", tech_stack=["Node", "Database"], years_of_experience=3)
        questions = generate(setup)

        self.assertEqual(
            [q.id for q in questions],
            ["q_tech_0", "q_tech_1", "q_job_1", "q_job_2", "q_behavior_1", "q_general_1"],
        )
        self.assertEqual(
            questions[0].text,
            "Explain your experience with Node and how you've used it in previous projects.",
        )
        self.assertIn("express", questions[0].keywords)
        self.assertIn("npm", questions[0].keywords)
        self.assertIn("SQL", questions[1].keywords)
        self.assertIn("NoSQL", questions[1].keywords)
        self.assertEqual(questions[2].text, "What makes you a good candidate for this Backend Developer position?")
        self.assertEqual(questions[3].text, "Describe a challenging problem you solved as a Backend Developer.")

    def test_length_is_capped_tech_count_plus_four(self):
        stacks = [[], ["React"], ["React", "Node"], ["a", "b", "c"], ["a", "b", "c", "d", "e"]]
        for stack in stacks:
            questions = generate(InterviewSetup(job_title="Dev", tech_stack=stack))
            self.assertEqual(len(questions), min(3, len(stack)) + 4)
            ids = [q.id for q in questions]
            self.assertEqual(len(ids), len(set(ids)), f"duplicate ids for {stack}")

    def test_entries_after_third_are_dropped(self):
        setup = InterviewSetup(job_title="Dev", tech_stack=["React", "Node", "Database", "System Design"])
        tech_ids = [q.id for q in generate(setup) if q.id.startswith("q_tech_")]
        self.assertEqual(tech_ids, ["q_tech_0", "q_tech_1", "q_tech_2"])

    def test_lookup_is_case_insensitive_and_unknown_is_empty(self):
        questions = generate(InterviewSetup(job_title="Dev", tech_stack=["REACT", "Elixir", "system design"]))
        self.assertEqual(questions[0].keywords, list(DEFAULT_KEYWORDS["react"]))
        self.assertEqual(questions[1].keywords, [])
        self.assertIn("scalability", questions[2].keywords)

    def test_surrounding_whitespace_is_stripped_before_lookup(self):
        setup = InterviewSetup(job_title="  Frontend Developer ", tech_stack=[" React "])
        questions = generate(setup)
        self.assertEqual(questions[0].keywords, list(DEFAULT_KEYWORDS["react"]))
        self.assertEqual(
            questions[0].text,
            "Explain your experience with React and how you've used it in previous projects.",
        )
        self.assertEqual(questions[1].text, "What makes you a good candidate for this Frontend Developer position?")

    def test_fixed_slots(self):
        questions = {q.id: q for q in generate(InterviewSetup(job_title="", tech_stack=[]))}
        self.assertEqual(questions["q_job_1"].keywords, ["experience", "skills", "projects", "achievements"])
        self.assertEqual(questions["q_job_2"].keywords, ["problem solving", "challenges", "solution", "impact"])
        self.assertEqual(
            questions["q_behavior_1"].text,
            "Tell me about a time when you had to meet a tight deadline. How did you handle it?",
        )
        self.assertEqual(
            questions["q_general_1"].keywords,
            ["continuous learning", "professional development", "resources", "community"],
        )

    def test_generation_is_deterministic(self):
        setup = InterviewSetup(job_title="Frontend Developer", tech_stack=["React", "JavaScript", "Frontend"])
        self.assertEqual(generate(setup), generate(setup))

    def test_injected_dictionary(self):
        generator = QuestionGenerator(build_keyword_dictionary({"Rust": ["ownership", "borrowing"]}))
        questions = generator.generate(InterviewSetup(job_title="Dev", tech_stack=["rust", "React"]))
        self.assertEqual(questions[0].keywords, ["ownership", "borrowing"])
        # React is not in the substitute dictionary
        self.assertEqual(questions[1].keywords, [])

    def test_default_dictionary_is_read_only(self):
        with self.assertRaises(TypeError):
            DEFAULT_KEYWORDS["go"] = ("goroutines",)


if __name__ == "__main__":
    unittest.main()
