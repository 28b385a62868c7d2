"""AI project-specific document templates."""

from ...models.project_document import ProjectDocumentCategory, ProjectDocumentType
from .types import DocumentTemplate


def _checklist(*items: str) -> list[dict]:
    return [{"item": item, "checked": False, "notes": ""} for item in items]


ai_feasibility_template = DocumentTemplate(
    type=ProjectDocumentType.AI_FEASIBILITY,
    name="AI Feasibility Assessment",
    description=(
        "Evaluate AI project viability across problem, data, technical, "
        "organizational, and financial dimensions"
    ),
    category=ProjectDocumentCategory.AI_SPECIFIC,
    default_content={
        "executiveSummary": {
            "recommendation": "Proceed with Caution",
            "confidence": "Medium",
            "summary": "",
        },
        "problemDefinition": {
            "businessProblem": "",
            "objectives": [],
            "successMetrics": [],
            "currentApproach": "",
            "painPoints": [],
        },
        "dataAssessment": {
            "dataAvailability": "Fair",
            "dataSources": [],
            "dataGaps": [],
            "dataGovernance": "",
            "legalCompliance": [],
            "score": 5,
        },
        "technicalFeasibility": {
            "aiApproach": "",
            "algorithmOptions": [],
            "infrastructureRequirements": [],
            "integrationComplexity": "Medium",
            "scalabilityConsiderations": "",
            "technicalRisks": [],
            "score": 5,
        },
        "organizationalFeasibility": {
            "teamExpertise": "",
            "changeManagement": "",
            "stakeholderAlignment": "Moderate",
            "trainingRequirements": [],
            "culturalReadiness": "",
            "score": 5,
        },
        "financialFeasibility": {
            "estimatedCost": {
                "development": 0,
                "infrastructure": 0,
                "maintenance": 0,
                "total": 0,
            },
            "expectedBenefits": [],
            "roi": "",
            "paybackPeriod": "",
            "score": 5,
        },
        "overallScore": 5,
        "recommendations": [],
        "nextSteps": [],
    },
)

ai_limitations_template = DocumentTemplate(
    type=ProjectDocumentType.AI_LIMITATIONS,
    name="AI System Limitations",
    description="Document AI system capabilities, limitations, failure modes, and user responsibilities",
    category=ProjectDocumentCategory.AI_SPECIFIC,
    default_content={
        "systemOverview": {
            "systemName": "",
            "purpose": "",
            "aiTechnologies": [],
        },
        "capabilities": [],
        "limitations": [],
        "outOfScopeUseCases": [],
        "edgeCases": [],
        "accuracyBoundaries": {
            "overallAccuracy": "",
            "confidenceThresholds": [
                {
                    "threshold": "High (>90%)",
                    "meaning": "High confidence in prediction",
                    "action": "Proceed with automated action",
                },
                {
                    "threshold": "Medium (70-90%)",
                    "meaning": "Moderate confidence",
                    "action": "Review before action",
                },
                {
                    "threshold": "Low (<70%)",
                    "meaning": "Low confidence",
                    "action": "Require human review",
                },
            ],
            "performanceByCategory": [],
        },
        "dataRequirements": {
            "inputRequirements": [],
            "dataQualityNeeds": [],
            "volumeConsiderations": "",
        },
        "environmentalConstraints": [],
        "failureModes": [],
        "humanOversightRequirements": {
            "whenRequired": [],
            "reviewProcess": "",
            "escalationCriteria": [],
        },
        "userResponsibilities": [
            "Verify AI outputs before critical decisions",
            "Report unexpected behaviors",
            "Provide feedback for continuous improvement",
            "Maintain data quality standards",
        ],
        "disclaimers": [
            "AI predictions are probabilistic and not guaranteed",
            "Historical data may not predict future outcomes",
            "System performance depends on data quality",
        ],
    },
)

monitoring_maintenance_template = DocumentTemplate(
    type=ProjectDocumentType.MONITORING_MAINTENANCE,
    name="Monitoring & Maintenance Plan",
    description="Define AI system monitoring, drift detection, retraining, and incident response procedures",
    category=ProjectDocumentCategory.AI_SPECIFIC,
    default_content={
        "systemInfo": {
            "systemName": "",
            "deploymentDate": "",
            "owner": "",
            "supportTeam": [],
        },
        "performanceMonitoring": {
            "metrics": [
                {
                    "metric": "Model Accuracy",
                    "target": "95%",
                    "alertThreshold": "<90%",
                    "measurementMethod": "Holdout validation set",
                    "frequency": "Daily",
                },
                {
                    "metric": "Response Time",
                    "target": "<500ms",
                    "alertThreshold": ">1000ms",
                    "measurementMethod": "API latency monitoring",
                    "frequency": "Real-time",
                },
                {
                    "metric": "Error Rate",
                    "target": "<1%",
                    "alertThreshold": ">5%",
                    "measurementMethod": "Error log analysis",
                    "frequency": "Hourly",
                },
            ],
            "dashboardLocation": "",
            "monitoringTools": [],
        },
        "modelDriftDetection": {
            "driftMetrics": [
                "Feature distribution shift",
                "Prediction distribution shift",
                "Performance degradation",
            ],
            "monitoringFrequency": "Weekly",
            "alertThresholds": [],
            "responseProtocol": "",
        },
        "retrainingPlan": {
            "triggers": [
                "Performance drops below threshold",
                "Significant data drift detected",
                "Scheduled quarterly retraining",
                "New data sources available",
            ],
            "schedule": "Quarterly or as needed",
            "dataRequirements": [],
            "validationProcess": "",
            "rollbackProcedure": "",
        },
        "incidentResponse": {
            "severityLevels": [
                {
                    "level": "Critical",
                    "criteria": "System down or major accuracy degradation",
                    "responseTime": "15 minutes",
                    "escalation": "Immediate escalation to engineering lead",
                },
                {
                    "level": "High",
                    "criteria": "Significant performance degradation",
                    "responseTime": "1 hour",
                    "escalation": "Notify engineering team",
                },
                {
                    "level": "Medium",
                    "criteria": "Minor issues or warnings",
                    "responseTime": "4 hours",
                    "escalation": "Log and schedule fix",
                },
                {
                    "level": "Low",
                    "criteria": "Cosmetic issues or improvements",
                    "responseTime": "24 hours",
                    "escalation": "Add to backlog",
                },
            ],
            "incidentProcedure": [
                "Identify and classify incident",
                "Notify appropriate stakeholders",
                "Implement immediate mitigation",
                "Document root cause",
                "Implement permanent fix",
                "Conduct post-mortem review",
            ],
            "communicationPlan": "",
            "postMortemProcess": "",
        },
        "maintenanceSchedule": [],
        "backupRecovery": {
            "backupFrequency": "Daily",
            "backupLocation": "",
            "retentionPeriod": "90 days",
            "recoveryProcedure": "",
            "rto": "4 hours",
            "rpo": "24 hours",
        },
        "updateProcedures": {
            "modelUpdates": "",
            "systemUpdates": "",
            "testingRequirements": [],
            "rollbackPlan": "",
        },
        "feedbackMechanisms": {
            "userFeedbackChannels": [],
            "feedbackReviewProcess": "",
            "incorporationCriteria": "",
        },
    },
)

data_requirements_template = DocumentTemplate(
    type=ProjectDocumentType.DATA_REQUIREMENTS,
    name="Data Requirements",
    description="Specify client data requirements, quality standards, and delivery timeline",
    category=ProjectDocumentCategory.AI_SPECIFIC,
    default_content={
        "projectContext": {
            "projectName": "",
            "dataUsePurpose": "",
            "aiApplicationType": "",
        },
        "dataTypes": [],
        "qualityStandards": {
            "completeness": "Minimum 95% of required fields populated",
            "accuracy": "Verified against source systems",
            "consistency": "Uniform formats across all records",
            "timeliness": "Data no older than specified period",
            "validationRules": [],
        },
        "formatSpecifications": {
            "fileFormats": ["CSV", "JSON"],
            "encoding": "UTF-8",
            "structureRequirements": [],
            "namingConventions": "",
        },
        "accessMethods": {
            "deliveryMethod": "File Transfer",
            "accessDetails": "",
            "authentication": "",
            "refreshFrequency": "",
        },
        "securityRequirements": {
            "sensitivityLevel": "Confidential",
            "encryptionRequirements": "AES-256 at rest, TLS 1.2+ in transit",
            "accessControls": "",
            "complianceRequirements": [],
        },
        "timeline": {
            "initialDataDueDate": "",
            "ongoingDataSchedule": "",
            "milestones": [],
        },
        "clientResponsibilities": [
            "Provide data in specified format",
            "Ensure data quality standards are met",
            "Notify of any data schema changes",
            "Provide timely access to data SMEs",
            "Sign off on data usage agreement",
        ],
        "dataProvisionChecklist": [],
        "consequencesOfDelay": "Data delays may impact project timeline and deliverable dates",
    },
)

deliverable_checklist_template = DocumentTemplate(
    type=ProjectDocumentType.DELIVERABLE_CHECKLIST,
    name="Deliverable Review Checklist",
    description="Quality gates and review criteria for project deliverables",
    category=ProjectDocumentCategory.AI_SPECIFIC,
    default_content={
        "deliverableInfo": {
            "deliverableName": "",
            "projectName": "",
            "version": "",
            "author": "",
            "reviewDate": "",
            "reviewer": "",
        },
        "generalQuality": _checklist(
            "Meets stated requirements",
            "Accuracy of data and information",
            "Formatting consistency",
            "Grammar and spelling checked",
            "Version control applied",
            "Proper citations and references",
        ),
        "technicalAccuracy": _checklist(
            "Calculations verified",
            "Data sources validated",
            "Methodology documented",
            "Assumptions clearly stated",
            "Limitations acknowledged",
        ),
        "clientRequirements": [],
        "formatting": _checklist(
            "Consistent styling throughout",
            "Headers and sections organized logically",
            "Tables and figures labeled correctly",
            "Page numbers and table of contents accurate",
            "Branding guidelines followed",
        ),
        "aiSpecific": _checklist(
            "Model performance metrics documented",
            "Training data sources identified",
            "Bias assessment completed",
            "Limitations and edge cases documented",
            "Confidence thresholds defined",
            "Human oversight requirements specified",
            "Monitoring recommendations included",
        ),
        "overallAssessment": {
            "ready": False,
            "requiredChanges": [],
            "minorSuggestions": [],
            "reviewerApproval": False,
            "approvalDate": "",
            "approverSignature": "",
        },
    },
)

ai_templates: list[DocumentTemplate] = [
    ai_feasibility_template,
    ai_limitations_template,
    monitoring_maintenance_template,
    data_requirements_template,
    deliverable_checklist_template,
]
