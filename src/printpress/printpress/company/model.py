from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.patches import UNSET, Patch
from ..common.validators import optional_text, require_non_empty
from ..core.constants import DEFAULT_COMPANY_ADDRESS, DEFAULT_COMPANY_NAME


@dataclass(frozen=True)
class CompanyInfo:
    name: str
    address: str
    logo: Optional[str] = None

    @classmethod
    def default(cls) -> "CompanyInfo":
        return cls(name=DEFAULT_COMPANY_NAME, address=DEFAULT_COMPANY_ADDRESS, logo=None)


@dataclass(frozen=True)
class CompanyInfoPatch(Patch):
    name: Optional[str] = UNSET
    address: Optional[str] = UNSET
    logo: Optional[str] = UNSET

    converters = {
        "name": lambda v: require_non_empty(v, "Company name"),
        "address": lambda v: require_non_empty(v, "Address"),
        "logo": optional_text,
    }
