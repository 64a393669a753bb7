"""Industry profiles for the Fabric readiness assessment.

Each industry carries display copy (description, key Fabric benefits, specific
considerations) and a multiplier triple applied by the value calculator:

    cost_savings    scales the projected annual cost savings
    time_to_value   scales the projected implementation time
    productivity    scales the projected annual productivity hours

Unknown industry keys resolve to the 'general' profile (all multipliers 1.0).
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class IndustryMultipliers:
    """Per-industry scaling applied to value-metric base calculations."""

    cost_savings: float = 1.0
    time_to_value: float = 1.0
    productivity: float = 1.0


@dataclass(frozen=True)
class IndustryProfile:
    """Static reference content for one industry.

    Attributes:
        key: Catalog key (e.g., 'financial-services').
        name: Display name.
        description: One-line description of the organisations covered.
        key_benefits: Fabric benefits most relevant to the industry.
        specific_considerations: Adoption concerns specific to the industry.
        multipliers: Value-metric scaling triple.
    """

    key: str
    name: str
    description: str
    key_benefits: tuple[str, ...]
    specific_considerations: tuple[str, ...]
    multipliers: IndustryMultipliers = field(default_factory=IndustryMultipliers)


DEFAULT_INDUSTRY = "general"

INDUSTRY_PROFILES: dict[str, IndustryProfile] = {
    "financial-services": IndustryProfile(
        key="financial-services",
        name="Financial Services",
        description="Banking, insurance, investment management, and fintech companies.",
        key_benefits=(
            "Compliance oversight and governance",
            "Fraud detection through advanced analytics",
            "Real-time transaction data processing",
            "Customer 360 and personalization",
        ),
        specific_considerations=(
            "Strict regulatory compliance and data sovereignty",
            "Transaction processing performance",
            "Risk management integration",
            "Legacy system integration",
        ),
        multipliers=IndustryMultipliers(cost_savings=1.2, time_to_value=0.9, productivity=1.1),
    ),
    "healthcare": IndustryProfile(
        key="healthcare",
        name="Healthcare",
        description=(
            "Hospitals, clinics, medical research, pharmaceutical, and health "
            "insurance organizations."
        ),
        key_benefits=(
            "Integration of clinical and operational data",
            "Protected health information (PHI) security",
            "Patient population analytics",
            "Medical research data warehousing",
        ),
        specific_considerations=(
            "HIPAA compliance and patient privacy",
            "Integration with healthcare systems (Epic, Cerner)",
            "Clinical data taxonomies and terminologies",
            "Longitudinal patient data analytics",
        ),
        multipliers=IndustryMultipliers(cost_savings=1.15, time_to_value=1.1, productivity=1.25),
    ),
    "manufacturing": IndustryProfile(
        key="manufacturing",
        name="Manufacturing",
        description=(
            "Industrial manufacturing, equipment, consumer goods, and production companies."
        ),
        key_benefits=(
            "IoT and sensor data processing",
            "Predictive maintenance analytics",
            "Supply chain optimization",
            "Quality control through data insights",
        ),
        specific_considerations=(
            "OT/IT integration challenges",
            "Real-time monitoring requirements",
            "Machine learning for predictive maintenance",
            "Geographically distributed facilities",
        ),
        multipliers=IndustryMultipliers(cost_savings=1.1, time_to_value=1.0, productivity=1.2),
    ),
    "retail": IndustryProfile(
        key="retail",
        name="Retail",
        description="Retail chains, e-commerce, consumer products, and distribution companies.",
        key_benefits=(
            "Customer behavior analysis",
            "Inventory and supply chain optimization",
            "Personalized marketing",
            "Omnichannel customer experience",
        ),
        specific_considerations=(
            "Point of sale (POS) integration",
            "Seasonal data variability",
            "Customer journey analytics",
            "Multi-channel data integration",
        ),
        multipliers=IndustryMultipliers(cost_savings=1.25, time_to_value=0.9, productivity=1.15),
    ),
    "public-sector": IndustryProfile(
        key="public-sector",
        name="Public Sector",
        description=(
            "Government agencies, municipalities, educational institutions, and non-profits."
        ),
        key_benefits=(
            "Citizen service optimization",
            "Transparent reporting and analytics",
            "Cross-agency data sharing",
            "Resource allocation optimization",
        ),
        specific_considerations=(
            "Data sovereignty and security classification",
            "Compliance with government standards (FedRAMP)",
            "Legacy system integration",
            "Budget constraints and procurement cycles",
        ),
        multipliers=IndustryMultipliers(cost_savings=0.9, time_to_value=1.3, productivity=1.05),
    ),
    "energy": IndustryProfile(
        key="energy",
        name="Energy & Utilities",
        description=(
            "Oil & gas, electric utilities, renewable energy, and energy service companies."
        ),
        key_benefits=(
            "Smart grid data analytics",
            "Energy consumption forecasting",
            "Asset performance optimization",
            "Regulatory compliance reporting",
        ),
        specific_considerations=(
            "SCADA system integration",
            "IoT sensor data volume and velocity",
            "Geographical distribution of assets",
            "Energy market compliance requirements",
        ),
        multipliers=IndustryMultipliers(cost_savings=1.15, time_to_value=1.1, productivity=1.1),
    ),
    DEFAULT_INDUSTRY: IndustryProfile(
        key=DEFAULT_INDUSTRY,
        name="General Business",
        description=(
            "Cross-industry standard assessment for organizations without specific "
            "industry requirements."
        ),
        key_benefits=(
            "Unified data analytics platform",
            "Business intelligence integration",
            "Collaborative data environment",
            "Reduced total cost of ownership",
        ),
        specific_considerations=(
            "Standard data integration patterns",
            "Business process optimization",
            "General compliance requirements",
            "IT alignment with business objectives",
        ),
    ),
}


def get_industry_profile(industry: str | None) -> IndustryProfile:
    """Return the profile for an industry key, falling back to 'general'.

    Args:
        industry: Industry catalog key. None or unknown keys resolve to the
            general profile.

    Returns:
        The matching IndustryProfile.
    """
    return INDUSTRY_PROFILES.get(industry or DEFAULT_INDUSTRY, INDUSTRY_PROFILES[DEFAULT_INDUSTRY])


def get_industry_multipliers(industry: str | None) -> IndustryMultipliers:
    """Return the value-metric multipliers for an industry key."""
    return get_industry_profile(industry).multipliers
