"""
REPORTING — ANALYSIS SUMMARY

Human-readable narrative for a completed client analysis.
Pure string composition from already-computed values; no business logic
beyond conditional inclusion of optional profile fields.
"""

from typing import List, Sequence

from insurance_advisor.domain.models import (
    ClientProfile,
    CoverageRecommendation,
    Priority,
    RiskFactors,
)
from insurance_advisor.utils.formatting import (
    DEFAULT_CURRENCY_SYMBOL,
    format_currency,
    format_multiplier,
)

ADVANCED_AGE = 50

PRIORITY_TAGS = {
    Priority.HIGH: "🔴 HIGH",
    Priority.MEDIUM: "🟡 MEDIUM",
    Priority.LOW: "🟢 LOW",
}

NEXT_STEPS = (
    "Review and adjust amounts to the available budget",
    "Compare products from different insurers",
    "Prioritise the high-priority coverages (🔴)",
    "Consider instalments and payment terms",
)


def _client_section(profile: ClientProfile, money) -> List[str]:
    profession = (profile.profession or "").lower()
    marital = profile.marital
    lines = [
        "👤 **Client Profile:**",
        f"• {profile.name}, {profile.age} years old, {profession}",
        f"• Marital status: {marital.value if marital else (profile.marital_status or 'Not informed')}",
        f"• Monthly income: {money(profile.monthly_income)}",
    ]
    if profile.net_worth is not None:
        lines.append(f"• Net worth: {money(profile.net_worth)}")
    if profile.existing_investments is not None:
        lines.append(f"• Investments: {money(profile.existing_investments)}")
    if profile.has_dependents:
        lines.append(f"• Dependents: {profile.effective_dependents_count} person(s)")
    else:
        lines.append("• Dependents: None")
    return lines


def _risk_section(profile: ClientProfile, risk_factors: RiskFactors) -> List[str]:
    lines = ["⚠️ **Identified Risk Factors:**"]
    if profile.smoker:
        lines.append("• Smoker - elevated cardiovascular and cancer risk")
    if profile.practices_risk_sport:
        lines.append("• Risk sports - greater exposure to accidents")
    if profile.family_history_serious_illness:
        lines.append("• Family history - genetic predisposition")
    if profile.age > ADVANCED_AGE:
        lines.append("• Advanced age - higher likelihood of health problems")
    lines.append(f"• Total risk multiplier: {format_multiplier(risk_factors.total_multiplier)}")
    return lines


def _coverage_section(coverages: Sequence[CoverageRecommendation], money) -> List[str]:
    lines = ["📋 **Recommended Coverages:**"]
    for coverage in coverages:
        lines.append(
            f"{PRIORITY_TAGS[coverage.priority]} - {coverage.type.label}: {money(coverage.amount)}"
        )
    return lines


def build_summary(
    profile: ClientProfile,
    risk_factors: RiskFactors,
    coverages: Sequence[CoverageRecommendation],
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
) -> str:
    """
    Build the narrative analysis summary

    Sections, in order: title, client profile, identified risk factors,
    recommended coverages, totals, rationale, next steps and, when set,
    the partner broker.

    Args:
        profile: Client profile
        risk_factors: Resolved risk factors
        coverages: Final (already filtered) coverages
        currency_symbol: Symbol for amounts

    Returns:
        Markdown-flavoured summary text
    """
    def money(value) -> str:
        return format_currency(value, currency_symbol)

    total_coverage = sum(c.amount for c in coverages)
    high_priority = sum(1 for c in coverages if c.priority == Priority.HIGH)

    lines = ["**COMPLETE LIFE INSURANCE ANALYSIS**", ""]
    lines += _client_section(profile, money)
    lines.append("")
    lines += _risk_section(profile, risk_factors)
    lines.append("")
    lines += _coverage_section(coverages, money)
    lines.append("")
    lines.append(f"💰 **Total Recommended Coverage:** {money(total_coverage)}")
    lines.append(f"🎯 **Priority Coverages:** {high_priority} of {len(coverages)}")
    lines.append("")

    if profile.has_dependents:
        rationale = (
            f"**Why it is essential:** With {profile.effective_dependents_count} dependent(s), "
            "your family relies on your income to keep its standard of living. "
        )
    else:
        rationale = (
            "**Why it matters:** Even without direct dependents, protection keeps you "
            "from becoming a financial burden to your family. "
        )
    rationale += (
        "The recommended coverages follow recognised actuarial methodologies "
        "and provide financial peace of mind."
    )
    lines.append(rationale)
    lines.append("")

    lines.append("**Next Steps:**")
    for index, step in enumerate(NEXT_STEPS, start=1):
        lines.append(f"{index}. {step}")

    if profile.partner_broker:
        lines.append("")
        lines.append(f"🤝 **Partner Broker:** {profile.partner_broker}")

    return "\n".join(lines)
