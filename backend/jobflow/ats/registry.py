from __future__ import annotations
from jobflow.ats.adapters.ashby import AshbyAdapter
from jobflow.ats.adapters.gem import GemAdapter
from jobflow.ats.adapters.greenhouse import GreenhouseAdapter
from jobflow.ats.adapters.lever import LeverAdapter
from jobflow.ats.adapters.recruitee import RecruiteeAdapter
from jobflow.ats.adapters.smartrecruiters import SmartRecruitersAdapter
from jobflow.ats.adapters.workable import WorkableAdapter
from jobflow.ats.base import ATSAdapter, Platform

ADAPTERS: dict[Platform, type[ATSAdapter]] = {
    Platform.WORKABLE: WorkableAdapter,
    Platform.GREENHOUSE: GreenhouseAdapter,
    Platform.LEVER: LeverAdapter,
    Platform.ASHBY: AshbyAdapter,
    Platform.RECRUITEE: RecruiteeAdapter,
    Platform.GEM: GemAdapter,
    Platform.SMARTRECRUITERS: SmartRecruitersAdapter,
}


def get_adapter(platform: Platform) -> ATSAdapter | None:
    adapter_cls = ADAPTERS.get(platform)
    return adapter_cls() if adapter_cls else None
