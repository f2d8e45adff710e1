"""View state for the hiring kit generator screen."""

from __future__ import annotations

import logging
from enum import Enum

from recruit_kit.models.analysis import ResumeAnalysis
from recruit_kit.models.hiring_kit import HiringKit, Seniority
from recruit_kit.pipeline.generator import GenerationError, RecruitmentGenerator
from recruit_kit.presets.loader import QuickStartPresets

logger = logging.getLogger(__name__)

MISSING_KIT_INPUTS = "Please ensure both Company Context and Job Notes are filled out."
MISSING_RESUME = "Please paste the resume text to analyze."
UNKNOWN_ERROR = "An unknown error occurred."


class KitStatus(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"
    READY = "ready"
    FAILED = "failed"


class OnboardingStatus(str, Enum):
    NONE = "none"
    GENERATING = "generating"
    READY = "ready"
    FAILED = "failed"


class AnalysisStatus(str, Enum):
    NONE = "none"
    ANALYZING = "analyzing"
    READY = "ready"
    FAILED = "failed"


class Tab(str, Enum):
    JOB_DESCRIPTION = "jd"
    SCORECARD = "scorecard"
    EMAILS = "emails"
    ONBOARDING = "onboarding"
    SCREENER = "screener"


TAB_LABELS: dict[Tab, str] = {
    Tab.JOB_DESCRIPTION: "Job Description",
    Tab.SCORECARD: "Interview Scorecard",
    Tab.EMAILS: "Email Templates",
    Tab.ONBOARDING: "Onboarding Plan",
    Tab.SCREENER: "Candidate Screener",
}


class HiringKitScreen:
    """Form inputs, results and status flags for one generator screen.

    The kit machine (IDLE -> GENERATING -> READY | FAILED) gates two
    independent sub-machines, onboarding and resume analysis. Only one
    operation runs at a time; every operation is a no-op while ``busy``.
    """

    def __init__(
        self,
        generator: RecruitmentGenerator,
        *,
        company_context: str = "",
        presets: QuickStartPresets | None = None,
    ):
        self.generator = generator
        self.presets = presets
        if not company_context and presets is not None:
            company_context = presets.company_context

        self.company_context = company_context
        self.notes = ""
        self.seniority = Seniority.MID_LEVEL
        self.resume_text = ""

        self.kit: HiringKit | None = None
        self.kit_status = KitStatus.IDLE
        self.error: str | None = None

        self.onboarding_status = OnboardingStatus.NONE
        self.onboarding_error: str | None = None

        self.analysis: ResumeAnalysis | None = None
        self.analysis_status = AnalysisStatus.NONE
        self.analysis_error: str | None = None

        self.active_tab = Tab.JOB_DESCRIPTION

    # -- derived flags -------------------------------------------------------

    @property
    def busy(self) -> bool:
        return (
            self.kit_status is KitStatus.GENERATING
            or self.onboarding_status is OnboardingStatus.GENERATING
            or self.analysis_status is AnalysisStatus.ANALYZING
        )

    @property
    def show_onboarding_action(self) -> bool:
        return self.kit is not None and self.kit.onboarding_plan is None

    @property
    def available_tabs(self) -> list[Tab]:
        if self.kit is None:
            return []
        tabs = [Tab.JOB_DESCRIPTION, Tab.SCORECARD, Tab.EMAILS]
        if self.kit.onboarding_plan is not None:
            tabs.append(Tab.ONBOARDING)
        tabs.append(Tab.SCREENER)
        return tabs

    # -- form actions --------------------------------------------------------

    def apply_preset(self, role_id: str) -> None:
        """Replace the notes with a quick-start role template."""
        if self.busy:
            return
        if self.presets is None:
            raise KeyError(f"Unknown role preset: {role_id}")
        self.notes = self.presets.get_role(role_id).notes

    def set_seniority(self, seniority: Seniority | str) -> None:
        if self.busy:
            return
        self.seniority = Seniority(seniority)

    def select_tab(self, tab: Tab | str) -> None:
        tab = Tab(tab)
        if tab in self.available_tabs:
            self.active_tab = tab

    # -- remote operations ---------------------------------------------------

    async def generate_kit(self) -> None:
        """Generate a new kit, discarding every artifact derived from the old one."""
        if self.busy:
            return
        if not self.notes.strip() or not self.company_context.strip():
            self.error = MISSING_KIT_INPUTS
            return

        self.kit_status = KitStatus.GENERATING
        self.error = None
        self.kit = None
        self.onboarding_status = OnboardingStatus.NONE
        self.onboarding_error = None
        self.analysis = None
        self.analysis_status = AnalysisStatus.NONE
        self.analysis_error = None
        self.resume_text = ""

        try:
            kit = await self.generator.generate_hiring_kit(
                self.notes, self.company_context, self.seniority
            )
        except GenerationError as e:
            self.error = str(e) or UNKNOWN_ERROR
            self.kit_status = KitStatus.FAILED
            return

        self.kit = kit
        self.kit_status = KitStatus.READY
        self.active_tab = Tab.JOB_DESCRIPTION

    async def generate_onboarding(self) -> None:
        """Attach a 30-60-90 day plan to the current kit."""
        if self.busy or not self.show_onboarding_action:
            return

        self.onboarding_status = OnboardingStatus.GENERATING
        self.onboarding_error = None
        try:
            plan = await self.generator.generate_onboarding_plan(
                self.kit.job_description, self.company_context
            )
        except GenerationError as e:
            self.onboarding_error = str(e) or UNKNOWN_ERROR
            self.onboarding_status = OnboardingStatus.FAILED
            return

        self.kit = self.kit.with_onboarding_plan(plan)
        self.onboarding_status = OnboardingStatus.READY
        self.active_tab = Tab.ONBOARDING

    async def analyze_resume(self) -> None:
        """Screen the pasted resume against the current kit."""
        if self.busy:
            return
        if not self.resume_text.strip() or self.kit is None:
            self.analysis_error = MISSING_RESUME
            return

        self.analysis_status = AnalysisStatus.ANALYZING
        self.analysis_error = None
        self.analysis = None
        try:
            analysis = await self.generator.analyze_resume(
                self.resume_text,
                self.kit.job_description,
                self.kit.interview_scorecard,
            )
        except GenerationError as e:
            self.analysis_error = str(e) or UNKNOWN_ERROR
            self.analysis_status = AnalysisStatus.FAILED
            return

        self.analysis = analysis
        self.analysis_status = AnalysisStatus.READY
