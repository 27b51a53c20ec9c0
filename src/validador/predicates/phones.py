"""Phone number predicates, generic and per country.

Per-country checks hang off a ``PhonePlan``::

    [phones.chile.mobile, "Invalid mobile number"]
    [phones.peru.landline_with_country_code, "Use +51 format"]

Numbers are matched as typed (after trimming): no spaces, dashes or
parentheses are stripped.
"""

import re
from dataclasses import dataclass
from typing import Any

from validador.predicates._values import as_text

_GENERIC_RE = re.compile(r"^[0-9]{7,15}$")
_GENERIC_CC_RE = re.compile(r"^\+\d{1,3}[0-9]{7,15}$")


def generic(value: Any) -> bool:
    """7 to 15 digits."""
    return bool(_GENERIC_RE.match(as_text(value).strip()))


def generic_with_country_code(value: Any) -> bool:
    """``+`` country code, then 7 to 15 digits."""
    return bool(_GENERIC_CC_RE.match(as_text(value).strip()))


@dataclass(frozen=True, slots=True)
class PhonePlan:
    """A country's numbering plan, local and international forms."""

    country: str
    mobile_re: re.Pattern[str]
    landline_re: re.Pattern[str]
    mobile_cc_re: re.Pattern[str]
    landline_cc_re: re.Pattern[str]

    def mobile(self, value: Any) -> bool:
        return bool(self.mobile_re.match(as_text(value).strip()))

    def landline(self, value: Any) -> bool:
        return bool(self.landline_re.match(as_text(value).strip()))

    def mobile_with_country_code(self, value: Any) -> bool:
        return bool(self.mobile_cc_re.match(as_text(value).strip()))

    def landline_with_country_code(self, value: Any) -> bool:
        return bool(self.landline_cc_re.match(as_text(value).strip()))

    def any(self, value: Any) -> bool:
        """Any of the four forms."""
        return (
            self.mobile(value)
            or self.landline(value)
            or self.mobile_with_country_code(value)
            or self.landline_with_country_code(value)
        )


def _plan(country: str, mobile: str, landline: str, mobile_cc: str, landline_cc: str) -> PhonePlan:
    return PhonePlan(
        country=country,
        mobile_re=re.compile(mobile),
        landline_re=re.compile(landline),
        mobile_cc_re=re.compile(mobile_cc),
        landline_cc_re=re.compile(landline_cc),
    )


argentina = _plan("AR", r"^11\d{8}$", r"^[23]\d{9}$", r"^\+54911\d{8}$", r"^\+54[23]\d{9}$")
chile = _plan("CL", r"^9\d{8}$", r"^[2-8]\d{8}$", r"^\+569\d{8}$", r"^\+56[2-8]\d{7}$")
colombia = _plan("CO", r"^3\d{9}$", r"^[2-8]\d{6}$", r"^\+573\d{9}$", r"^\+57[1-8]\d{7}$")
haiti = _plan("HT", r"^3\d{7}$", r"^2\d{7}$", r"^\+5093\d{7}$", r"^\+5092\d{7}$")
mexico = _plan("MX", r"^55\d{8}$", r"^[2-9]\d{9}$", r"^\+5255\d{8}$", r"^\+52[2-9]\d{9}$")
peru = _plan("PE", r"^9\d{8}$", r"^[1-8]\d{6,7}$", r"^\+519\d{8}$", r"^\+51[1-8]\d{6,7}$")
venezuela = _plan(
    "VE",
    r"^(0412|0414|0416|0424|0426)\d{7}$",
    r"^(0212|02[4-7]\d)\d{7}$",
    r"^\+58(412|414|416|424|426)\d{7}$",
    r"^\+58(212|2[4-7]\d)\d{7}$",
)

PLANS: dict[str, PhonePlan] = {
    plan.country: plan for plan in (argentina, chile, colombia, haiti, mexico, peru, venezuela)
}


def by_country(code: str) -> PhonePlan:
    """Plan for an ISO 3166 alpha-2 code, e.g. ``"CL"``.

    Raises:
        KeyError: No plan for *code*.
    """
    return PLANS[code.upper()]
