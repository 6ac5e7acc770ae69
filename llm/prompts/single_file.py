"""
This module defines the LLM prompt used for turning one Gherkin scenario into a single
self-contained test file for the chosen framework.
"""

PROMPT = """
# Single-File Test Generation Prompt for LLM

You are a senior QA automation engineer expert in {framework}. Convert the Gherkin
scenario below into ONE runnable {framework} test.

## Rules:
{rules}
-   Implement every Given/When/Then step; keep assertions for every Then step.
-   Output ONLY the code. No explanations, no markdown fences.

---

**Feature URL:** {feature_url}

**Scenario:**
{scenario_text}
"""
