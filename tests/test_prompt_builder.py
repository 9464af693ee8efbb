from ai_helper.prompts.prompt_builder import TEST_PROMPT, build_analysis_prompt


class TestBuildAnalysisPrompt:
    def test_string_data(self):
        prompt = build_analysis_prompt("  sales up 10% in Q3  ")

        lines = prompt.split("\n")
        assert lines[0] == "Analyze the following data and provide insights:"
        assert "Data: sales up 10% in Q3" in lines
        assert lines[-4:] == [
            "Please provide:",
            "1. Key patterns",
            "2. Potential issues",
            "3. Recommendations",
        ]

    def test_structured_data_rendered_as_json(self):
        prompt = build_analysis_prompt({"visits": [1, 2, 3]})

        assert '"visits": [' in prompt
        assert prompt.startswith("Analyze the following data")

    def test_no_surrounding_whitespace(self):
        prompt = build_analysis_prompt("x")
        assert prompt == prompt.strip()


def test_test_prompt():
    assert TEST_PROMPT == 'Say "Hello! API connection successful!" and nothing else.'
