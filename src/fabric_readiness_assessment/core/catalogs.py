"""Questionnaire option catalogs for the Fabric readiness assessment.

Every multi-select and single-select question draws its options from one of
the fixed catalogs below. Scoring rules match these exact strings; any other
value is tolerated by the input model but never earns a bonus.

Questionnaire steps:
    1 Infrastructure    current infrastructure, warehouse, BI tool
    2 Data              data types, data volume, real-time needs
    3 Microsoft Tech    Microsoft investments, Power BI usage
    4 Requirements      budget, timeline, compliance, data sovereignty
"""

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Step 1: Infrastructure
# ---------------------------------------------------------------------------

INFRASTRUCTURE_OPTIONS: tuple[str, ...] = (
    "SQL Server",
    "Oracle",
    "Azure",
    "AWS",
    "Google Cloud",
    "On-premises servers",
    "Hadoop/Spark",
    "MongoDB",
)

WAREHOUSE_OPTIONS: tuple[str, ...] = (
    "Azure Synapse",
    "SQL Server",
    "Snowflake",
    "AWS Redshift",
    "Google BigQuery",
    "Oracle",
    "None",
)

BI_TOOL_OPTIONS: tuple[str, ...] = (
    "Power BI",
    "Tableau",
    "Qlik",
    "Looker",
    "Excel",
    "SAP BusinessObjects",
    "None",
)

# ---------------------------------------------------------------------------
# Step 2: Data
# ---------------------------------------------------------------------------

DATA_TYPE_STRUCTURED = "Structured (relational databases)"
DATA_TYPE_SEMI_STRUCTURED = "Semi-structured (JSON, XML)"
DATA_TYPE_UNSTRUCTURED = "Unstructured (documents, emails)"
DATA_TYPE_STREAMING = "IoT/sensor data"

DATA_TYPE_OPTIONS: tuple[str, ...] = (
    DATA_TYPE_STRUCTURED,
    DATA_TYPE_SEMI_STRUCTURED,
    DATA_TYPE_UNSTRUCTURED,
    DATA_TYPE_STREAMING,
    "Images/video",
    "Audio",
    "Social media data",
    "Log files",
)

# ---------------------------------------------------------------------------
# Step 3: Microsoft Tech
# ---------------------------------------------------------------------------

MS_AZURE = "Azure"
MS_POWER_BI = "Power BI"
MS_365 = "Microsoft 365"
MS_DYNAMICS_365 = "Dynamics 365"

MICROSOFT_INVESTMENT_OPTIONS: tuple[str, ...] = (
    MS_AZURE,
    MS_POWER_BI,
    MS_365,
    MS_DYNAMICS_365,
    "SQL Server",
    "Azure Synapse Analytics",
    "Azure Data Factory",
    "SharePoint",
)

# ---------------------------------------------------------------------------
# Step 4: Requirements
# ---------------------------------------------------------------------------

COMPLIANCE_OPTIONS: tuple[str, ...] = (
    "GDPR",
    "HIPAA",
    "CCPA",
    "SOX",
    "PCI DSS",
    "ISO 27001",
    "FedRAMP",
    "Industry-specific",
)

# 1-10 slider bounds shared by every scale question
SCALE_MIN: int = 1
SCALE_MAX: int = 10
SCALE_DEFAULT: int = 5


@dataclass(frozen=True)
class WizardStep:
    """A single page of the questionnaire.

    Attributes:
        number: 1-based step index.
        title: Short title shown in the progress bar.
        fields: Input-model field names collected on this step.
    """

    number: int
    title: str
    fields: tuple[str, ...]


WIZARD_STEPS: tuple[WizardStep, ...] = (
    WizardStep(
        number=1,
        title="Infrastructure",
        fields=("current_infrastructure", "data_warehouse_solution", "business_intelligence_tool"),
    ),
    WizardStep(
        number=2,
        title="Data",
        fields=("data_types", "data_volume", "real_time_needs"),
    ),
    WizardStep(
        number=3,
        title="Microsoft Tech",
        fields=("microsoft_investments", "power_bi_usage"),
    ),
    WizardStep(
        number=4,
        title="Requirements",
        fields=(
            "budget_constraint",
            "time_to_implementation",
            "compliance_requirements",
            "data_sovereignty_needs",
        ),
    ),
)

TOTAL_STEPS: int = len(WIZARD_STEPS)

# Convenience mapping for the multi-select questions
SET_FIELD_CATALOGS: dict[str, tuple[str, ...]] = {
    "current_infrastructure": INFRASTRUCTURE_OPTIONS,
    "data_types": DATA_TYPE_OPTIONS,
    "microsoft_investments": MICROSOFT_INVESTMENT_OPTIONS,
    "compliance_requirements": COMPLIANCE_OPTIONS,
}

CHOICE_FIELD_CATALOGS: dict[str, tuple[str, ...]] = {
    "data_warehouse_solution": WAREHOUSE_OPTIONS,
    "business_intelligence_tool": BI_TOOL_OPTIONS,
}


def is_known_option(field_name: str, value: str) -> bool:
    """Return True when value belongs to the catalog for field_name.

    Args:
        field_name: Input-model field name of a set or choice question.
        value: Option string to check.

    Returns:
        True if the value is listed in the field's catalog. Fields without a
        catalog always return False.
    """
    catalog = SET_FIELD_CATALOGS.get(field_name) or CHOICE_FIELD_CATALOGS.get(field_name, ())
    return value in catalog
