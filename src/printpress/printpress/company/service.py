from __future__ import annotations

import logging

from .model import CompanyInfo, CompanyInfoPatch
from .repository import CompanyInfoRepository

logger = logging.getLogger(__name__)


class CompanyService:
    def __init__(self, company: CompanyInfoRepository):
        self._company = company

    def get(self) -> CompanyInfo:
        return self._company.get() or CompanyInfo.default()

    def update(self, patch: CompanyInfoPatch) -> CompanyInfo:
        info = patch.apply(self.get())
        self._company.save(info)
        logger.info("Company info updated (%s)", info.name)
        return info
