"""Core project document templates."""

from ...models.project_document import ProjectDocumentCategory, ProjectDocumentType
from .types import DocumentTemplate

project_plan_template = DocumentTemplate(
    type=ProjectDocumentType.PROJECT_PLAN,
    name="Project Plan",
    description="Define project scope, phases, milestones, resources, and approvals",
    category=ProjectDocumentCategory.CORE,
    default_content={
        "overview": {
            "projectName": "",
            "projectManager": "",
            "startDate": "",
            "endDate": "",
            "status": "Not Started",
        },
        "scope": {
            "inScope": [],
            "outOfScope": [],
            "assumptions": [],
            "constraints": [],
        },
        "phases": [
            {"name": "Discovery", "startDate": "", "endDate": "", "deliverables": [], "status": "Not Started"},
            {"name": "Design", "startDate": "", "endDate": "", "deliverables": [], "status": "Not Started"},
            {"name": "Build", "startDate": "", "endDate": "", "deliverables": [], "status": "Not Started"},
            {"name": "Deploy", "startDate": "", "endDate": "", "deliverables": [], "status": "Not Started"},
        ],
        "milestones": [],
        "resources": [],
        "dependencies": [],
        "approvals": [],
    },
)

status_report_template = DocumentTemplate(
    type=ProjectDocumentType.STATUS_REPORT,
    name="Status Report",
    description="Periodic summary of progress, schedule, budget, risks, and next steps",
    category=ProjectDocumentCategory.CORE,
    default_content={
        "reportDate": "",
        "reportingPeriod": {"start": "", "end": ""},
        "overallStatus": "Green",
        "executiveSummary": "",
        "accomplishments": [],
        "inProgress": [],
        "upcoming": [],
        "scheduleStatus": {"status": "On Track", "notes": ""},
        "budgetStatus": {"planned": 0, "actual": 0, "variance": 0, "notes": ""},
        "risksAndIssues": [],
        "pendingDecisions": [],
        "nextSteps": [],
    },
)

risk_register_template = DocumentTemplate(
    type=ProjectDocumentType.RISK_REGISTER,
    name="Risk Register",
    description="Track project risks with likelihood, impact, owners, and mitigation strategies",
    category=ProjectDocumentCategory.CORE,
    default_content={
        "risks": [],
        "riskMatrix": {
            "totalRisks": 0,
            "highRisks": 0,
            "mediumRisks": 0,
            "lowRisks": 0,
        },
    },
)

issue_log_template = DocumentTemplate(
    type=ProjectDocumentType.ISSUE_LOG,
    name="Issue Log",
    description="Record and track project issues through to resolution",
    category=ProjectDocumentCategory.CORE,
    default_content={
        "issues": [],
        "summary": {
            "total": 0,
            "open": 0,
            "inProgress": 0,
            "resolved": 0,
        },
    },
)

meeting_notes_template = DocumentTemplate(
    type=ProjectDocumentType.MEETING_NOTES,
    name="Meeting Notes",
    description="Capture agenda, discussion, decisions, and action items from a meeting",
    category=ProjectDocumentCategory.CORE,
    default_content={
        "meetingInfo": {
            "title": "",
            "date": "",
            "time": "",
            "location": "",
            "facilitator": "",
            "attendees": [],
            "absentees": [],
        },
        "agenda": [],
        "discussionPoints": [],
        "decisions": [],
        "actionItems": [],
        "parkingLot": [],
        "nextMeeting": {"date": "", "time": "", "proposedAgenda": []},
    },
)

lessons_learned_template = DocumentTemplate(
    type=ProjectDocumentType.LESSONS_LEARNED,
    name="Lessons Learned",
    description="Reflect on successes, challenges, and process improvements",
    category=ProjectDocumentCategory.CORE,
    default_content={
        "projectSummary": {
            "projectName": "",
            "completionDate": "",
            "projectManager": "",
            "teamMembers": [],
        },
        "successAreas": [],
        "challengeAreas": [],
        "processImprovements": [],
        "toolsAndTechniques": {
            "effective": [],
            "ineffective": [],
            "recommended": [],
        },
        "teamFeedback": [],
        "overallRecommendations": [],
    },
)

communication_plan_template = DocumentTemplate(
    type=ProjectDocumentType.COMMUNICATION_PLAN,
    name="Communication Plan",
    description="Stakeholders, communication matrix, escalation paths, and meeting cadence",
    category=ProjectDocumentCategory.CORE,
    default_content={
        "stakeholders": [],
        "communicationMatrix": [
            {
                "communicationType": "Status Report",
                "audience": [],
                "frequency": "Weekly",
                "owner": "",
                "deliveryMethod": "Email",
                "format": "Document",
            },
        ],
        "escalationProcedures": [
            {"level": 1, "trigger": "", "escalateTo": "Project Manager", "responseTime": "1 business day", "contactMethod": "Email"},
            {"level": 2, "trigger": "", "escalateTo": "Project Sponsor", "responseTime": "4 hours", "contactMethod": "Phone"},
        ],
        "meetingSchedule": [],
        "responseTimeExpectations": {
            "urgent": "1 hour",
            "high": "4 hours",
            "normal": "1 business day",
            "low": "3 business days",
        },
        "documentSharing": {
            "platform": "",
            "accessInstructions": "",
            "folderStructure": [],
        },
    },
)

core_templates: list[DocumentTemplate] = [
    project_plan_template,
    status_report_template,
    risk_register_template,
    issue_log_template,
    meeting_notes_template,
    lessons_learned_template,
    communication_plan_template,
]
