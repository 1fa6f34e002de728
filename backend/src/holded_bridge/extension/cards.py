"""Card descriptors for the Holded endpoints."""

from holded_bridge.extension.actions import (
    EMPLOYEES_URL,
    PROJECT_FILTER_FIELDS,
    PROJECT_TIME_SLOTS_URL,
    PROJECTS_URL,
    REGISTER_TIME_URL,
    UPDATABLE_TIME_FIELDS,
    UPDATE_PROJECT_TIME_URL,
)
from holded_bridge.extension.models import (
    CardDefaults,
    CardDescriptor,
    CardRules,
    ConfigParam,
)

UPDATE_PROJECT_TIME_CARD = CardDescriptor(
    id="holded_update_project_time_request",
    template_name="Edit Holded time entry",
    name="holded_update_project_time",
    defaults=CardDefaults(
        width=3,
        height=6,
        name="update project time",
        icon="clock",
        description="Update one or more fields of a project time-tracking entry",
        params={field: field for field in ("projectId", "timeTrackingId", *UPDATABLE_TIME_FIELDS)},
        rules=CardRules(
            action_url=UPDATE_PROJECT_TIME_URL,
            method="post",
            required=("projectId", "timeTrackingId"),
            optional=UPDATABLE_TIME_FIELDS,
            numeric=("duration", "costHour"),
            boolean=("billable",),
            require_update_field=True,
        ),
        config_params={
            "projectId": ConfigParam(type="text", label="Project ID *"),
            "timeTrackingId": ConfigParam(type="text", label="Time Tracking ID *"),
            "duration": ConfigParam(type="number", label="Duration (seconds)"),
            "desc": ConfigParam(visible=False, label="Description"),
            "costHour": ConfigParam(visible=False, type="number", label="Cost/hour"),
            "date": ConfigParam(visible=False, label="Date (YYYY-MM-DD or ISO)"),
            "start": ConfigParam(visible=False, label="Start (ISO)"),
            "end": ConfigParam(visible=False, label="End (ISO)"),
            "userId": ConfigParam(visible=False, label="User ID"),
            "taskId": ConfigParam(visible=False, label="Task ID"),
            "categoryId": ConfigParam(visible=False, label="Category ID"),
            "billable": ConfigParam(visible=False, label="Billable (true/false)"),
        },
    ),
)

PROJECTS_CARD = CardDescriptor(
    id="holded_projects_request",
    template_name="Holded projects",
    name="holded_projects",
    defaults=CardDefaults(
        name="Holded projects",
        icon="list",
        description="List of projects from Holded",
        params={field: field for field in PROJECT_FILTER_FIELDS},
        rules=CardRules(
            action_url=PROJECTS_URL,
            method="get",
            optional=PROJECT_FILTER_FIELDS,
        ),
        config_params={
            "name": ConfigParam(label="Name (contains)"),
            "status": ConfigParam(label="Status"),
            "archived": ConfigParam(label="Archived (true/false)"),
            "customerId": ConfigParam(label="Customer ID"),
            "page": ConfigParam(type="number", label="Page"),
            "limit": ConfigParam(type="number", label="Limit"),
        },
    ),
)

REGISTER_TIME_CARD = CardDescriptor(
    id="holded_register_time_request",
    template_name="Register time in Holded",
    name="holded_register_time",
    defaults=CardDefaults(
        name="Register time on project",
        icon="clock",
        description="Register a time entry (duration in seconds) on a Holded project",
        params={"projectId": "projectId", "userId": "userId", "duration": "duration"},
        rules=CardRules(
            action_url=REGISTER_TIME_URL,
            method="post",
            required=("projectId", "userId", "duration"),
            numeric=("duration",),
        ),
        config_params={
            "projectId": ConfigParam(label="Project ID"),
            "userId": ConfigParam(label="User ID"),
            "duration": ConfigParam(
                default_value="3600", type="number", label="Duration (seconds)"
            ),
        },
    ),
)

EMPLOYEES_CARD = CardDescriptor(
    id="holded_employees_request",
    template_name="Holded employees",
    name="holded_employees",
    defaults=CardDefaults(
        name="Holded employees",
        icon="users",
        description="List of employees from Holded",
        rules=CardRules(action_url=EMPLOYEES_URL, method="get"),
    ),
)

PROJECT_TIME_SLOTS_CARD = CardDescriptor(
    id="holded_project_time_slots_request",
    template_name="Holded time entries",
    name="holded_project_time_slots",
    defaults=CardDefaults(
        name="Holded project time entries",
        icon="clock",
        description="Time entries of a project from Holded",
        params={"projectId": "projectId"},
        rules=CardRules(
            action_url=PROJECT_TIME_SLOTS_URL,
            method="get",
            required=("projectId",),
        ),
        config_params={"projectId": ConfigParam()},
    ),
)

HOLDED_CARDS: tuple[CardDescriptor, ...] = (
    UPDATE_PROJECT_TIME_CARD,
    PROJECTS_CARD,
    REGISTER_TIME_CARD,
    EMPLOYEES_CARD,
    PROJECT_TIME_SLOTS_CARD,
)
