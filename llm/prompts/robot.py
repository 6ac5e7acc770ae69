"""
This module defines the LLM prompt used for generating Robot Framework code:
a Python variables file, a keywords resource and a test suite.
Literal Robot variables are written as ${{NAME}} because the prompt goes through str.format().
"""

PROMPT = """
# Robot Framework Code Generation Prompt for LLM

You are an expert Robot Framework automation engineer generating enterprise-grade,
production-ready automation code. Follow every rule exactly.

## SECTION: DATA FILE (testdata.py)
-   Python variables file for Robot Framework (imported via Variables testdata.py).
-   FLAT structure only: no dicts, no lists, no nesting.
-   ALL locators stored as variables using ONLY these valid formats:
        id:xxx      -> ID_USERNAME = "id:user-name"
        css=xxx     -> CSS_TITLE = "css=.title"
        xpath:xxx   -> XPATH_CART = "xpath://div[@class='cart']"
        name:xxx    -> NAME_EMAIL = "name:email"
-   NEVER use invalid formats like "class:xxx" or "className:xxx".
-   ALL test data stored here: URLs, credentials, expected texts, error messages.
-   Consistent naming: PREFIX_ELEMENTNAME (ID_USERNAME, CSS_LOGIN_BTN, VALID_USER, ERR_MSG_LOCKED).

## SECTION: KEYWORDS FILE (keywords.robot)
*** Settings ***
Library    SeleniumLibrary
Variables    testdata.py

*** Keywords ***
-   Create a reusable keyword for EVERY UI interaction; keywords accept [Arguments].
-   Before EVERY click, input or interaction add exactly one:
        Wait Until Element Is Visible    ${{LOCATOR_VAR}}    10s
-   Title Case keyword names: "Input Username", "Click Login Button", "Verify Error Message".
-   NEVER hardcode locators or test data inside keywords; use ${{VAR}} from testdata.py
    and pass data via arguments.
-   Assertions live inside keywords ("Verify Page Title", "Verify Error Message Is Displayed").
-   For URL verification prefer Wait Until Location Contains    expected-path    10s.

## SECTION: TEST FILE (tests.robot)
*** Settings ***
Resource    keywords.robot
Variables    testdata.py
Suite Teardown    Close All Browsers

*** Test Cases ***
-   Human-readable test names derived from the test description.
-   [Documentation] and [Tags] for each test case.
-   Test steps ONLY call keywords; no raw SeleniumLibrary commands.
-   Pass test data as keyword arguments, e.g. Input Username    ${{VALID_USER}}

## STYLE RULES:
-   4-space indentation throughout.
-   Code must be executable without ANY modification.
-   No hardcoded locators or data anywhere except testdata.py.
{output_contract}
---

**Test Cases:**
{test_cases}

**Locators:**
{locators}

**Test Data:**
{test_data}
"""
