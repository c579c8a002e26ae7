"""
Execution trace for one analyzer run.

Each pipeline stage (Tokenizer, Tagger, Parser, Extractor, Validator) adds a
step recording what it received and what it produced, so a failed or
surprising analysis can be inspected stage by stage.
"""
import json
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


class ExecutionTrace:
    """Step-by-step record of analysing a single sentence."""

    def __init__(self, initial_query: str):
        self.trace_id = str(uuid.uuid4())
        self.start_time = _now()
        self.end_time = None
        self.initial_query = initial_query
        self.steps: List[Dict[str, Any]] = []
        self.final_response = None
        self.error = None

    def add_step(self, step_name: str, inputs: dict, outputs: dict, description: str = None):
        """
        Append a stage record.

        Args:
            step_name: Stage name, e.g. "Tokenizer" or "Validator".
            inputs: JSON-serializable inputs of the stage.
            outputs: JSON-serializable outputs of the stage.
            description: Optional one-line description.
        """
        step = {
            "step_id": len(self.steps) + 1,
            "name": step_name,
            "timestamp": _now(),
            "inputs": inputs,
            "outputs": outputs,
        }
        if description:
            step["description"] = description
        self.steps.append(step)

    def step(self, step_name: str) -> Optional[Dict[str, Any]]:
        """Most recent step with this name."""
        for step in reversed(self.steps):
            if step["name"] == step_name:
                return step
        return None

    @property
    def step_names(self) -> List[str]:
        return [step["name"] for step in self.steps]

    @property
    def finished(self) -> bool:
        return self.end_time is not None

    @property
    def succeeded(self) -> bool:
        return self.finished and self.error is None

    def set_final_response(self, response: str):
        """Record the final summary and close the trace."""
        self.final_response = response
        self.end_time = _now()

    def set_error(self, error_message: str):
        """Record a failure and close the trace."""
        self.error = error_message
        self.end_time = _now()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "trace_id": self.trace_id,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "initial_query": self.initial_query,
            "steps": list(self.steps),
            "final_response": self.final_response,
            "error": self.error,
        }

    def to_json(self, indent=2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
