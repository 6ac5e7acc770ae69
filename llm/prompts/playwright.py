"""
This module defines the LLM prompt used for generating Playwright Page Object Model code
(page object, test spec and JSON test data) from manual test cases.
"""

PROMPT = """
# Playwright Code Generation Prompt for LLM

You are a senior QA automation engineer expert in Playwright.
Generate Playwright test code with THREE separate outputs.

## REQUIREMENTS:
1.  Use Playwright Test Runner (@playwright/test).
2.  Must implement Page Object Model (POM).
3.  Each test file creates ONE page instance per file (not global across files).
4.  Use beforeEach to instantiate the Page Object.
5.  All assertions should preferably live inside the Page Object methods.
6.  DO NOT hardcode locators or test data inside test files.

## PAGE OBJECT FILE:
-   All locators as class properties.
-   Reusable action methods (login, fillForm, clickButton, etc.).
-   Use getByRole, getByLabel, getByPlaceholder, getByText where possible;
    fall back to locator() for CSS/XPath selectors.
-   Import test data from the data file.

## TEST FILE:
-   Clean and high-level, calling Page Object methods only.
-   One describe() block for grouping, each test case as a separate test() block.
-   NO hardcoded test data; reference data file values.

## DATA FILE (testData.json):
-   Valid JSON with a flat global structure (not nested per scenario).
-   Store all test data: username, password, invalidUsername, invalidPassword,
    emptyUsername, emptyPassword, errorMessage, etc.

Example data structure:
{{
  "username": "testuser",
  "password": "password123",
  "invalidUsername": "wronguser",
  "errorMessage": "Invalid credentials"
}}
{output_contract}
---

**Test Cases:**
{test_cases}

**Locators:**
{locators}

**Test Data:**
{test_data}
"""

SINGLE_FILE_RULES = """-   Use @playwright/test with one test() per scenario.
-   Prefer getByRole, getByLabel and getByText locators.
-   Use web-first assertions (await expect(...).toBeVisible())."""
