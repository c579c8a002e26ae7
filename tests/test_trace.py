"""
Tests for the ExecutionTrace.
"""
import json
import unittest

from xbar_nlp.trace import ExecutionTrace


class TestExecutionTrace(unittest.TestCase):

    def test_trace_initialization(self):
        """Tests that the trace is initialized correctly."""
        trace = ExecutionTrace(initial_query="The dog runs")
        self.assertEqual(trace.initial_query, "The dog runs")
        self.assertIsNotNone(trace.trace_id)
        self.assertTrue(trace.start_time.endswith('Z'))
        self.assertIsNone(trace.end_time)
        self.assertEqual(trace.steps, [])
        self.assertIsNone(trace.final_response)
        self.assertIsNone(trace.error)
        self.assertFalse(trace.finished)

    def test_add_step(self):
        """Tests adding steps to the trace."""
        trace = ExecutionTrace("The dog runs")
        trace.add_step("Tokenizer", inputs={"text": "The dog runs"},
                       outputs={"tokens": ["The", "dog", "runs"]},
                       description="Split the sentence into word tokens.")
        trace.add_step("Tagger", inputs={}, outputs={})

        self.assertEqual(trace.step_names, ["Tokenizer", "Tagger"])
        step = trace.steps[0]
        self.assertEqual(step["step_id"], 1)
        self.assertEqual(step["outputs"], {"tokens": ["The", "dog", "runs"]})
        self.assertEqual(step["description"], "Split the sentence into word tokens.")
        self.assertIsNotNone(step["timestamp"])
        self.assertNotIn("description", trace.steps[1])
        self.assertEqual(trace.steps[1]["step_id"], 2)

    def test_step_lookup(self):
        trace = ExecutionTrace("query")
        trace.add_step("Parser", inputs={}, outputs={"attempt": 1})
        trace.add_step("Parser", inputs={}, outputs={"attempt": 2})
        self.assertEqual(trace.step("Parser")["outputs"], {"attempt": 2})
        self.assertIsNone(trace.step("Validator"))

    def test_set_final_response(self):
        trace = ExecutionTrace("query")
        trace.set_final_response("Sentence Type: DECLARATIVE")
        self.assertEqual(trace.final_response, "Sentence Type: DECLARATIVE")
        self.assertIsNotNone(trace.end_time)
        self.assertTrue(trace.succeeded)

    def test_set_error(self):
        trace = ExecutionTrace("query")
        trace.set_error("Parsing failed: No matching pattern found")
        self.assertEqual(trace.error, "Parsing failed: No matching pattern found")
        self.assertTrue(trace.finished)
        self.assertFalse(trace.succeeded)
        self.assertIsNone(trace.final_response)

    def test_to_json(self):
        trace = ExecutionTrace("The café is on the corner")
        trace.add_step("Tokenizer", inputs={}, outputs={})
        trace.set_final_response("done")

        json_output = trace.to_json()
        self.assertIn("café", json_output)
        data = json.loads(json_output)
        self.assertEqual(data['trace_id'], trace.trace_id)
        self.assertEqual(data['initial_query'], trace.initial_query)
        self.assertEqual(len(data['steps']), 1)
        self.assertEqual(data['final_response'], "done")
        self.assertIsNone(data['error'])


if __name__ == '__main__':
    unittest.main()
