"""Built-in brand profile for Jaden's Excavation & Landscaping."""

from __future__ import annotations

from brandaudit.brand.record import BrandRecord, BusinessInfo, SeoMetadata, ServiceCatalog

_LOGO: str = "/images/jadenlogo.png"

DEFAULT_BRAND: BrandRecord = BrandRecord(
    company_name="Jaden's Excavation & Landscaping",
    short_name="Jaden's Excavation",
    legal_name="Jaden's Excavation & Landscaping Ltd.",
    tagline="Professional Excavation & Landscaping Solutions",
    primary_domain="jadensexcavation.ca",
    alt_domains=("www.jadensexcavation.ca",),
    primary_phone_display="(250) 555-0199",
    primary_phone_dial="+12505550199",
    primary_email="info@jadensexcavation.ca",
    service_area=("Metro Vancouver", "Greater Vancouver Area"),
    primary_location="Vancouver, BC",
    address_lines=("123 Example Rd", "Vancouver, BC", "V6X 1A1"),
    colours={
        "primary": "#265D2D",
        "secondary": "#F9A825",
        "accent": "#8BC34A",
        "neutral_dark": "#1E1E1E",
        "neutral_light": "#F6F6F6",
        "success": "#4CAF50",
        "warning": "#FF9800",
    },
    logo_paths={"full": _LOGO, "mark": _LOGO, "favicon": _LOGO, "header_logo": _LOGO},
    social={"facebook": "", "instagram": "", "linkedin": ""},
    services=ServiceCatalog(
        primary=("Residential Excavation", "Commercial Landscaping", "Site Preparation"),
        categories={
            "residential": "Residential Services",
            "commercial": "Commercial Services",
            "landscaping": "Landscaping Services",
        },
    ),
    business_info=BusinessInfo(
        service_radius="Metro Vancouver Area",
        emergency_service=False,
        licensed=True,
        insured=True,
    ),
    seo=SeoMetadata(
        default_title="Jaden's Excavation & Landscaping - Professional Excavation Services Metro Vancouver BC",
        default_description=(
            "Professional excavation and landscaping services serving Metro Vancouver "
            "and Greater Vancouver Area. Licensed and insured."
        ),
        keywords=(
            "excavation",
            "landscaping",
            "Metro Vancouver BC",
            "excavation service",
            "residential excavation",
            "commercial landscaping",
        ),
        locale="en_CA",
        region="BC",
        placename="Vancouver",
    ),
)
