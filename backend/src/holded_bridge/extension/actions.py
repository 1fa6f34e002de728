"""Action descriptors for the Holded endpoints.

Tokens are left empty here; ``initialize_extension`` fills in a fresh
service token per action.
"""

from holded_bridge.extension.models import ActionDescriptor

HOLDED_API_PREFIX = "/api/v1/holded"

EMPLOYEES_URL = f"{HOLDED_API_PREFIX}/employees"
PROJECTS_URL = f"{HOLDED_API_PREFIX}/projects"
PROJECT_TIME_SLOTS_URL = f"{HOLDED_API_PREFIX}/project_time_slots"
REGISTER_TIME_URL = f"{HOLDED_API_PREFIX}/register_time"
UPDATE_PROJECT_TIME_URL = f"{HOLDED_API_PREFIX}/update_project_time"

PROJECT_FILTER_FIELDS = ("name", "status", "archived", "customerId", "page", "limit")
UPDATABLE_TIME_FIELDS = (
    "duration",
    "desc",
    "costHour",
    "date",
    "start",
    "end",
    "userId",
    "taskId",
    "categoryId",
    "billable",
)

HOLDED_ACTIONS: tuple[ActionDescriptor, ...] = (
    ActionDescriptor(
        name="holded_update_project_time",
        description="Update a project time-tracking entry in Holded",
        url=UPDATE_PROJECT_TIME_URL,
        params={
            "projectId": "Project ID (required)",
            "timeTrackingId": "Time tracking ID (required)",
            "duration": "Duration in seconds (optional)",
            "desc": "Description (optional)",
            "costHour": "Cost per hour (optional)",
            "date": "Date (YYYY-MM-DD or ISO) (optional)",
            "start": "Start (ISO) (optional)",
            "end": "End (ISO) (optional)",
            "userId": "User ID (optional)",
            "taskId": "Task ID (optional)",
            "categoryId": "Category ID (optional)",
            "billable": "true/false (optional)",
        },
        method="post",
    ),
    ActionDescriptor(
        name="holded_projects",
        description="List projects from Holded",
        url=PROJECTS_URL,
        params={
            "name": "Filter by name (optional)",
            "status": "Status (optional)",
            "archived": "true/false (optional)",
            "customerId": "Customer ID (optional)",
            "page": "Page (optional)",
            "limit": "Limit (optional)",
        },
        method="get",
    ),
    ActionDescriptor(
        name="holded_register_time",
        description="Register a time entry on a Holded project",
        url=REGISTER_TIME_URL,
        params={
            "projectId": "Project ID",
            "userId": "User ID",
            "duration": "Duration (number of seconds)",
        },
        method="post",
    ),
    ActionDescriptor(
        name="holded_employees",
        description="List employees from Holded",
        url=EMPLOYEES_URL,
        params={},
        method="get",
    ),
    ActionDescriptor(
        name="holded_project_time_slots",
        description="List the time entries of a Holded project",
        url=PROJECT_TIME_SLOTS_URL,
        params={"projectId": "Project ID"},
        method="get",
    ),
)
