"""
This module defines the LLM prompt used for generating Selenium WebDriver (JavaScript, Mocha + Chai)
Page Object Model code from manual test cases.
"""

PROMPT = """
# Selenium Code Generation Prompt for LLM

You are a senior QA automation engineer expert in Selenium WebDriver.
Generate Selenium WebDriver test code with THREE separate outputs.

## REQUIREMENTS:
1.  Use Selenium WebDriver with JavaScript.
2.  Use Mocha as test runner and Chai for assertions.
3.  Must implement Page Object Model (POM).
4.  Use a SINGLE shared WebDriver instance initialized in before() for all test cases;
    do NOT create a new driver per test.
5.  All reusable actions and assertions live inside the Page Object, not in the test file.
6.  DO NOT hardcode locators or test data inside test files.

## PAGE OBJECT FILE:
-   Constructor that accepts the driver instance.
-   All locators as class properties using By.css(), By.id(), By.xpath().
-   Reusable action methods (login, fillForm, clickButton, waitForElement, etc.)
    with proper async/await handling.
-   Import test data from the data file.

## TEST FILE:
-   Driver created in before() and quit in after().
-   describe() and it() blocks calling Page Object methods only.
-   NO hardcoded test data; reference data file values.

## DATA FILE (testData.json):
-   Valid JSON with a flat global structure (not nested per scenario).
-   Store all test data: username, password, invalidUsername, invalidPassword,
    emptyUsername, emptyPassword, errorMessage, etc.
{output_contract}
---

**Test Cases:**
{test_cases}

**Locators:**
{locators}

**Test Data:**
{test_data}
"""

SINGLE_FILE_RULES = """-   Use selenium-webdriver for JavaScript with Mocha describe/it and Chai expect.
-   Create the driver in before() and quit it in after().
-   Wait for elements with driver.wait(until.elementLocated(...)) before interacting."""
