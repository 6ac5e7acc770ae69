"""
This module declares the artifact kinds the service can generate.
Each kind contributes only what differs between generators: its prompt templates,
its sampling temperature and the ordered sections its completion is split into.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from llm.prompts import cypress, gherkin, playwright, robot, selenium

CODE_FAILURE_MESSAGE = "Failed to generate code. Please try again."


@dataclass(frozen=True)
class Section:
    """One named artifact carved out of a completion by a marker pair."""
    name: str
    marker: str
    hint: str
    placeholder: str = ""

    @property
    def start_marker(self) -> str:
        return f"==={self.marker}_START==="

    @property
    def end_marker(self) -> str:
        return f"==={self.marker}_END==="


@dataclass(frozen=True)
class ArtifactKind:
    """
    Everything the pipeline needs to know about one generator.

    Attributes:
        name (str): URL-facing name, e.g. "playwright".
        label (str): Human-readable framework name used in logs and prompts.
        temperature (float): Sampling temperature sent to the gateway.
        prompt (str): Template for the test-case mode.
        sections (Tuple[Section, ...]): Ordered sections; empty for unsplit output.
        result_field (Optional[str]): Response key for unsplit output ("gherkin").
        scenario_prompt (Optional[str]): Template for the URL + scenario mode.
        single_file_rules (Optional[str]): Enables the single-file {code} mode.
        fallback_section (Optional[str]): Section receiving the raw text when no marker is found.
        fallback_placeholders (Dict[str, str]): Text for the other sections in that case.
        failure_message (str): Caller-facing message for upstream and unknown failures.
    """
    name: str
    label: str
    temperature: float
    prompt: str
    sections: Tuple[Section, ...] = ()
    result_field: Optional[str] = None
    scenario_prompt: Optional[str] = None
    single_file_rules: Optional[str] = None
    fallback_section: Optional[str] = None
    fallback_placeholders: Dict[str, str] = field(default_factory=dict)
    failure_message: str = CODE_FAILURE_MESSAGE


POM_SECTIONS = (
    Section("pageObject", "PAGE_OBJECT", "Page Object file content here"),
    Section("testFile", "TEST_FILE", "Test file content here"),
    Section("dataFile", "DATA_FILE", "JSON data file content here"),
)

GHERKIN = ArtifactKind(
    name="gherkin",
    label="Gherkin",
    temperature=0.3,
    prompt=gherkin.PROMPT,
    result_field="gherkin",
    scenario_prompt=gherkin.SCENARIO_PROMPT,
    failure_message="Failed to generate Gherkin. Please try again.",
)

PLAYWRIGHT = ArtifactKind(
    name="playwright",
    label="Playwright",
    temperature=0.2,
    prompt=playwright.PROMPT,
    sections=POM_SECTIONS,
    single_file_rules=playwright.SINGLE_FILE_RULES,
)

SELENIUM = ArtifactKind(
    name="selenium",
    label="Selenium WebDriver",
    temperature=0.2,
    prompt=selenium.PROMPT,
    sections=POM_SECTIONS,
    single_file_rules=selenium.SINGLE_FILE_RULES,
)

CYPRESS = ArtifactKind(
    name="cypress",
    label="Cypress",
    temperature=0.2,
    prompt=cypress.PROMPT,
    sections=(
        Section("pageObject", "PAGE_OBJECT", "Custom commands file content here (cypress/support/commands.js)"),
        Section("testFile", "TEST_FILE", "Spec file content here"),
        Section("dataFile", "DATA_FILE", "Fixture JSON content here (cypress/fixtures/testData.json)"),
    ),
    single_file_rules=cypress.SINGLE_FILE_RULES,
)

# Robot files are emitted variables first so keywords and tests can reference them.
ROBOT = ArtifactKind(
    name="robot",
    label="Robot Framework",
    temperature=0.3,
    prompt=robot.PROMPT,
    sections=(
        Section("dataFile", "DATA_FILE", "testdata.py content", "# No data file generated"),
        Section("pageObject", "KEYWORDS", "keywords.robot content", "# No keywords generated"),
        Section("testFile", "ROBOT_TEST", "tests.robot content", "# No test file generated"),
    ),
    fallback_section="testFile",
    fallback_placeholders={
        "pageObject": "# Keywords could not be parsed separately\n# Please review the test file for all content",
        "dataFile": "# No data file was generated",
    },
)

KINDS: Dict[str, ArtifactKind] = {
    kind.name: kind for kind in (GHERKIN, PLAYWRIGHT, SELENIUM, CYPRESS, ROBOT)
}


def get_kind(name: str) -> Optional[ArtifactKind]:
    return KINDS.get(name.lower())
