"""
This module defines the dataclasses that travel through one generation request:
the sanitized inputs handed to the prompt builder and the immutable set of
generated artifacts handed back to the caller.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List

MAX_TEST_CASES = 50
MAX_STRING_LENGTH = 1000
MAX_ID_LENGTH = 100
MAX_URL_LENGTH = 500
MAX_DESC_LENGTH = 2000

@dataclass
class TestCase:
    """
    Represents one manual test row uploaded by the user.

    Attributes:
        id (str): The test case identifier, at most 100 characters.
        description (str): A short description of what is being tested.
        steps (str): The manual steps, at most 1000 characters.
        expected (str): The expected result, at most 1000 characters.
    """
    __test__ = False  # not a pytest class

    id: str
    description: str = ""
    steps: str = ""
    expected: str = ""

    def to_payload(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "description": self.description,
            "steps": self.steps,
            "expected": self.expected,
        }

@dataclass
class GenerationRequest:
    """
    The sanitized unit of work for the test-case based prompts.

    Attributes:
        test_cases (List[TestCase]): Between 1 and 50 test cases.
        locators (Dict[str, Any]): Symbolic element name -> selector.
        test_data (Dict[str, Any]): Data field name -> literal value.
    """
    test_cases: List[TestCase]
    locators: Dict[str, Any] = field(default_factory=dict)
    test_data: Dict[str, Any] = field(default_factory=dict)

    def to_payload(self) -> Dict[str, Any]:
        """Returns the request in the camelCase shape the HTTP clients send."""
        return {
            "testCases": [tc.to_payload() for tc in self.test_cases],
            "locators": self.locators,
            "testData": self.test_data,
        }

@dataclass
class ScenarioRequest:
    """A page URL plus a prose scenario, used by the Gherkin URL mode."""
    url: str
    scenario_desc: str

@dataclass
class SingleFileRequest:
    """One Gherkin scenario to be turned into a single code file."""
    scenario_text: str
    feature_url: str = ""

@dataclass(frozen=True)
class GeneratedArtifactSet:
    """
    The artifacts produced by one request, keyed by role
    (pageObject / testFile / dataFile, or a single gherkin / code field).
    """
    artifacts: Dict[str, str]

    def __getitem__(self, role: str) -> str:
        return self.artifacts[role]

    def to_dict(self) -> Dict[str, str]:
        return dict(self.artifacts)
