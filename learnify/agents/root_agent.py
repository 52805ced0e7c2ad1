"""Root agent: ADK entrypoint for study plan generation."""
from google.adk.agents.llm_agent import Agent

from learnify.agents.tools import create_study_plans

root_agent = Agent(
    model="gemini-2.5-flash",
    name="root_agent",
    description="Creates structured study plans for the subjects a learner wants to master.",
    instruction=(
        "Collect the subjects the user wants to learn, then call create_study_plans once "
        "with all of them. Reply in the user's language (use language='en' for English, "
        "'id' for Indonesian). Show each plan as returned and mention any failed subjects."
    ),
    tools=[create_study_plans],
)
