"""Project lifecycle document templates."""

from ...models.project_document import ProjectDocumentCategory, ProjectDocumentType
from .types import DocumentTemplate

kickoff_agenda_template = DocumentTemplate(
    type=ProjectDocumentType.KICKOFF_AGENDA,
    name="Kickoff Meeting Agenda",
    description="Plan the project kickoff: attendees, agenda items, and expected outcomes",
    category=ProjectDocumentCategory.LIFECYCLE,
    default_content={
        "meetingDetails": {
            "date": "",
            "time": "",
            "duration": "90 minutes",
            "location": "",
            "facilitator": "",
        },
        "attendees": [],
        "agendaItems": [
            {"time": "", "duration": "10 min", "topic": "Introductions", "presenter": "", "objectives": [], "materials": []},
            {"time": "", "duration": "20 min", "topic": "Project Overview and Goals", "presenter": "", "objectives": [], "materials": []},
            {"time": "", "duration": "20 min", "topic": "Scope and Deliverables", "presenter": "", "objectives": [], "materials": []},
            {"time": "", "duration": "15 min", "topic": "Timeline and Milestones", "presenter": "", "objectives": [], "materials": []},
            {"time": "", "duration": "15 min", "topic": "Roles and Communication", "presenter": "", "objectives": [], "materials": []},
            {"time": "", "duration": "10 min", "topic": "Questions and Next Steps", "presenter": "", "objectives": [], "materials": []},
        ],
        "preRequisites": [],
        "expectedOutcomes": [],
        "postMeetingActions": [],
    },
)

change_request_template = DocumentTemplate(
    type=ProjectDocumentType.CHANGE_REQUEST,
    name="Change Request",
    description="Propose a scope, schedule, or budget change with impact analysis and approvals",
    category=ProjectDocumentCategory.LIFECYCLE,
    default_content={
        "requestInfo": {
            "requestId": "",
            "requestDate": "",
            "requestor": "",
            "priority": "Medium",
            "status": "Submitted",
        },
        "currentState": "",
        "proposedChange": "",
        "justification": "",
        "impactAnalysis": {
            "scopeImpact": "",
            "scheduleImpact": "",
            "costImpact": {"additionalCost": 0, "description": ""},
            "resourceImpact": "",
            "riskImplications": [],
            "qualityImpact": "",
        },
        "alternatives": [],
        "recommendation": "",
        "approvals": [],
        "implementationPlan": "",
    },
)

project_closure_template = DocumentTemplate(
    type=ProjectDocumentType.PROJECT_CLOSURE,
    name="Project Closure Report",
    description="Confirm objectives, deliverables, budget, handoffs, and sign-offs at project end",
    category=ProjectDocumentCategory.LIFECYCLE,
    default_content={
        "projectSummary": {
            "projectName": "",
            "startDate": "",
            "endDate": "",
            "projectManager": "",
            "client": "",
        },
        "objectives": [],
        "deliverables": [],
        "budgetSummary": {
            "plannedBudget": 0,
            "actualSpend": 0,
            "variance": 0,
            "explanation": "",
        },
        "scheduleSummary": {
            "plannedEndDate": "",
            "actualEndDate": "",
            "variance": "",
            "explanation": "",
        },
        "outstandingItems": [],
        "handoffItems": [],
        "clientSatisfaction": {
            "overallRating": 3,
            "feedback": "",
            "testimonialObtained": False,
        },
        "teamAcknowledgments": [],
        "signoffs": [],
    },
)

knowledge_transfer_template = DocumentTemplate(
    type=ProjectDocumentType.KNOWLEDGE_TRANSFER,
    name="Knowledge Transfer",
    description="Hand over systems, documentation, access, processes, and support contacts",
    category=ProjectDocumentCategory.LIFECYCLE,
    default_content={
        "systemOverview": {
            "systemName": "",
            "purpose": "",
            "keyComponents": [],
            "architectureDiagram": "",
        },
        "technicalDocumentation": [],
        "accessCredentials": [],
        "processes": [],
        "maintenanceTasks": [],
        "troubleshooting": [],
        "vendorContacts": [],
        "trainingCompleted": [],
    },
)

lifecycle_templates: list[DocumentTemplate] = [
    kickoff_agenda_template,
    change_request_template,
    project_closure_template,
    knowledge_transfer_template,
]
