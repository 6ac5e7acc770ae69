"""
This module defines the LLM prompts used for generating Gherkin BDD feature text,
either from uploaded manual test cases or from a page URL plus a prose scenario.
Both prompts ask for raw Gherkin only; the response is not split into sections.
"""

FORMAT_RULES = """
## STRICT FORMAT RULES:
1.  **Feature header** (required):
    Feature: <Short Descriptive Name>
      As a <role>
      I want <goal>
      So that <benefit>
2.  **Scenario titles**: concise and human-readable. NEVER include numbered steps,
    URLs, technical identifiers or implementation details.
    GOOD: "Scenario: Successful login with valid credentials"
    BAD:  "Scenario: 1. Navigate to https://example.com and enter username"
3.  **Step classification** (each step on its own line, 4-space indent):
    Given -> precondition or initial state (ONE per line)
    When  -> the FIRST main user action
    And   -> additional user actions (after When, one per line)
    Then  -> ONE expected outcome
    And   -> additional expected outcomes (after Then, one per line)
4.  **Transformation rules**:
    -   REMOVE all numbering (1., 2., 3.) from steps.
    -   REMOVE URLs from step text; refer to pages by name instead.
    -   CONVERT imperative steps ("Click the button") into natural BDD language
        ("the user clicks the Login button").
    -   SPLIT compound actions: each And step contains exactly ONE action.
    -   Error messages MUST appear in Then or And steps:
        Then an error message "Error text here" should be displayed
5.  **Formatting**: no blank lines between steps, ONE blank line between scenarios,
    2-space indent for the narrative, 4-space indent for steps.
6.  **Output**: raw Gherkin text ONLY. No markdown fences, no comments, no explanations.

## EXAMPLE OUTPUT:
Feature: Login Functionality
  As a user
  I want to login into the system
  So that I can access the products page

  Scenario: Successful login with valid credentials
    Given the user is on the login page
    When the user enters a valid username
    And the user enters a valid password
    And the user clicks the Login button
    Then the user should be redirected to the Products page
"""

PROMPT = """
# Gherkin Generation Prompt for LLM

You are a senior QA engineer and BDD specialist. Your task is to TRANSFORM the
provided manual test cases into properly structured Gherkin BDD scenarios,
one scenario per test case.

Do NOT copy raw input text directly into steps. Rewrite it into declarative,
human-readable Gherkin. Use the test data values where a step needs concrete data.
""" + FORMAT_RULES + """
---

**Test Cases (provided for transformation):**
{test_cases}

**Locators (for context only, never put selectors into steps):**
{locators}

**Test Data:**
{test_data}
"""

SCENARIO_PROMPT = """
# Gherkin Generation Prompt for LLM

You are a senior QA engineer and BDD specialist. Your task is to TRANSFORM the
provided scenario description into properly structured Gherkin BDD scenarios.

Do NOT copy raw input text directly into steps. Convert imperative instructions
into declarative, human-readable Gherkin.
""" + FORMAT_RULES + """
---

**URL:** {url}

**Scenario description:**
{scenario_desc}
"""
