"""
Industry Catalogs — BiasMeter AI

Static per-industry lookup tables used by the report generator and the
format endpoint. Keys are lowercase; lookups lowercase the argument and fall
back to a generic entry for anything unknown.

Industries:
  - hiring, finance, education, health, justice,
    ecommerce, social, industrial
"""
from typing import Dict, List

DEFAULT_BASE_BIAS = 25.0

INDUSTRY_BASES: Dict[str, float] = {
    "hiring": 25.0,
    "finance": 35.0,
    "education": 20.0,
    "health": 30.0,
    "justice": 40.0,
    "ecommerce": 15.0,
    "social": 22.0,
    "industrial": 28.0,
}

DEFAULT_FORMAT = "Gender,Feature1,Feature2,Selected"

INDUSTRY_FORMATS: Dict[str, str] = {
    "hiring": "Gender,Experience,Position,Selected",
    "finance": "Gender,Income,CreditScore,LoanApproved",
    "education": "Gender,TestScore,Extracurriculars,Admitted",
    "health": "Gender,Age,Symptoms,TreatmentGiven",
    "justice": "Ethnicity,Priors,BailAmount,Sentenced",
    "ecommerce": "UserGender,BrowsingHistory,PriceShown,Purchased",
    "social": "UserDemographic,ContentType,Visibility,Engagement",
    "industrial": "WorkerGender,Experience,SafetyIncidents,Promoted",
}

DEFAULT_DESCRIPTION = "Analyzes bias in decision-making systems"

INDUSTRY_DESCRIPTIONS: Dict[str, str] = {
    "hiring": "Analyzes gender bias in hiring decisions",
    "finance": "Detects bias in loan approvals and credit scoring",
    "education": "Identifies bias in admissions and grading",
    "health": "Analyzes bias in medical treatment recommendations",
    "justice": "Detects bias in bail amounts and sentencing",
    "ecommerce": "Identifies price discrimination and recommendation bias",
    "social": "Analyzes content visibility and engagement bias",
    "industrial": "Detects bias in promotions and safety evaluations",
}

DEFAULT_RECOMMENDATIONS: List[str] = [
    "Review data collection methods for potential bias",
    "Implement regular bias audits of decision systems",
    "Diversify training datasets across demographic groups",
    "Transparent algorithmic decision-making processes",
    "Establish bias monitoring and response protocols",
]

INDUSTRY_RECOMMENDATIONS: Dict[str, List[str]] = {
    "hiring": [
        "Implement blind resume screening",
        "Standardize interview questions across all candidates",
        "Set diversity goals for hiring panels",
        "Regular bias audits of hiring algorithms",
        "Use structured interviews with scoring rubrics",
    ],
    "finance": [
        "Remove ZIP code and neighborhood data from loan decisions",
        "Audit interest rate algorithms monthly for disparities",
        "Provide alternative credit scoring options",
        "Transparent loan approval criteria accessible to applicants",
        "Regular training on fair lending practices",
    ],
    "education": [
        "Review admission criteria for socioeconomic bias",
        "Implement anonymous grading where possible",
        "Diversify curriculum examples and case studies",
        "Regular faculty bias training and workshops",
        "Monitor grade distributions across demographic groups",
    ],
    "health": [
        "Standard treatment protocols for all demographics",
        "Regular bias audits of diagnostic algorithms",
        "Diverse representation in clinical trials",
        "Cultural competency training for medical staff",
        "Patient outcome monitoring by demographic",
    ],
}


def _key(industry: str) -> str:
    return (industry or "").lower()


def get_base_bias(industry: str) -> float:
    return INDUSTRY_BASES.get(_key(industry), DEFAULT_BASE_BIAS)


def get_format(industry: str) -> str:
    """CSV column layout expected for an industry upload."""
    return INDUSTRY_FORMATS.get(_key(industry), DEFAULT_FORMAT)


def get_description(industry: str) -> str:
    return INDUSTRY_DESCRIPTIONS.get(_key(industry), DEFAULT_DESCRIPTION)


def get_recommendations(industry: str) -> List[str]:
    # Copy so callers can't mutate the shared table
    return list(INDUSTRY_RECOMMENDATIONS.get(_key(industry), DEFAULT_RECOMMENDATIONS))
