"""
This module defines the LLM prompt used for generating Cypress code: custom commands,
a Mocha spec file and a fixture holding the test data.
"""

PROMPT = """
# Cypress Code Generation Prompt for LLM

You are a senior QA automation engineer expert in Cypress.
Generate Cypress test code using Mocha structure with custom commands.

## REQUIREMENTS:
1.  Use Cypress with the Mocha test runner (describe, it, before, beforeEach).
2.  Leverage Cypress auto-waiting; no explicit waits.
3.  Use cy.get(), cy.contains(), cy.find() for element selection.
4.  NEVER hardcode locators inside the spec file.

## COMMANDS FILE (cypress/support/commands.js):
-   Custom commands for reusable actions (cy.login, cy.fillForm, etc.)
    declared with Cypress.Commands.add().
-   All locators defined as constants at the top.
-   Chain commands properly.

## SPEC FILE:
-   describe() and it() blocks; a before() hook visits the page once.
-   Call custom commands instead of direct cy.get() where possible.
-   Use proper Cypress assertions (.should()).
-   Load test data with cy.fixture('testData').

## FIXTURE FILE (cypress/fixtures/testData.json):
-   Valid JSON with a flat structure holding every credential, URL and expected message.
{output_contract}
---

**Test Cases:**
{test_cases}

**Locators:**
{locators}

**Test Data:**
{test_data}
"""

SINGLE_FILE_RULES = """-   Use Cypress with Mocha describe/it blocks.
-   Rely on Cypress auto-waiting and .should() assertions.
-   Do not add explicit cy.wait() calls."""
