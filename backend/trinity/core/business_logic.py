"""Business Logic Generator — synthetic processing steps narrating a screen transition.

Invariants:
    - Pure, stateless lookup keyed by "<from>-><to>"
    - Unknown pairs yield exactly ONE generic process_navigation step (never zero, never raises)
    - Returned lists are fresh copies; callers own timing and staggering
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class StepTemplate:
    """One step before it is stamped with an id and timestamp."""
    step: str
    description: str


TRANSITION_STEPS: dict[str, tuple[StepTemplate, ...]] = {
    "dashboard->project_detail": (
        StepTemplate("validate_project_access", "Checking user permissions for project"),
        StepTemplate("load_project_data", "Fetching project details from database"),
        StepTemplate("prepare_ui_state", "Preparing project detail interface"),
    ),
    "dashboard->create_project": (
        StepTemplate("initialize_form", "Setting up new project form"),
        StepTemplate("load_user_defaults", "Loading user preferences and defaults"),
    ),
    "create_project->dashboard": (
        StepTemplate("validate_project_data", "Validating project information"),
        StepTemplate("save_to_database", "Persisting new project to database"),
        StepTemplate("update_project_list", "Refreshing project list cache"),
        StepTemplate("send_notifications", "Notifying team members of new project"),
    ),
    "project_detail->dashboard": (
        StepTemplate("cache_project_state", "Saving current project view state"),
        StepTemplate("update_recent_views", "Adding to recently viewed projects"),
    ),
}


def transition_key(from_screen: str | None, to_screen: str) -> str:
    return f"{from_screen}->{to_screen}"


def steps_for(
    from_screen: str | None, to_screen: str, user_action: str | None = None,
) -> list[StepTemplate]:
    """Ordered step templates for a transition.

    user_action is accepted for parity with the transition descriptor; the
    table is keyed by screens only.
    """
    steps = TRANSITION_STEPS.get(transition_key(from_screen, to_screen))
    if steps:
        return list(steps)
    return [StepTemplate(
        "process_navigation",
        f"Processing navigation from {from_screen} to {to_screen}",
    )]
