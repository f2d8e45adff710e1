"""Streamlit Web UI for recruit-kit.

Two views:
  A) Generator: company context + role notes + seniority → hiring kit,
     onboarding plan and candidate screening
  B) Chat: free-form streaming assistant
"""

from __future__ import annotations

import asyncio
import json
import logging
import os

logger = logging.getLogger(__name__)

import streamlit as st
import streamlit.components.v1 as components
from dotenv import load_dotenv

load_dotenv()

from recruit_kit.clients.llm_client import LLMClient
from recruit_kit.config import load_config
from recruit_kit.credentials import resolve_api_key
from recruit_kit.export.kit_export import export_filename, render_kit_html, render_kit_markdown
from recruit_kit.export.plain_text import onboarding_to_text, scorecard_to_text
from recruit_kit.models.hiring_kit import Seniority
from recruit_kit.pipeline.generator import RecruitmentGenerator
from recruit_kit.presets.loader import load_presets
from recruit_kit.rendering.markdown import to_html
from recruit_kit.state.chat_screen import ChatScreen
from recruit_kit.state.clipboard import CopyAction
from recruit_kit.state.hiring_screen import TAB_LABELS, HiringKitScreen, Tab
from recruit_kit.usage.cost_calculator import summarize_usage

config = load_config()
logging.basicConfig(
    level=config.app.resolved_log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title=config.ui.page_title,
    page_icon=":briefcase:",
    layout="wide",
)

# ---------------------------------------------------------------------------
# Credentials (a missing key stops the app)
# ---------------------------------------------------------------------------


def _runtime_secrets() -> dict:
    """Streamlit secrets as a plain dict; empty when no secrets file exists."""
    try:
        return dict(st.secrets)
    except Exception:
        return {}


credentials = resolve_api_key(os.environ, _runtime_secrets())
if not credentials.ok:
    st.error(f"Startup failed: {credentials.error}")
    st.stop()

# ---------------------------------------------------------------------------
# Per-session services
# ---------------------------------------------------------------------------


def _event_loop() -> asyncio.AbstractEventLoop:
    """One loop per browser session; the API client's connections live on it.

    The loop is never closed explicitly. It lives as long as the session
    state and is dropped with it when Streamlit expires the session.
    """
    if "event_loop" not in st.session_state:
        st.session_state.event_loop = asyncio.new_event_loop()
    return st.session_state.event_loop


def _run(coro):
    return _event_loop().run_until_complete(coro)


if "generator" not in st.session_state:
    llm = LLMClient(api_key=credentials.api_key)
    generator = RecruitmentGenerator.from_config(llm, config)
    st.session_state.llm = llm
    st.session_state.generator = generator
    st.session_state.hiring_screen = HiringKitScreen(generator, presets=load_presets())
    st.session_state.copy_actions = {}

screen: HiringKitScreen = st.session_state.hiring_screen


class StreamlitClipboard:
    """Writes to the browser clipboard through a zero-height component."""

    def write_text(self, text: str) -> None:
        payload = json.dumps(text).replace("</", "<\\/")
        components.html(
            f"<script>navigator.clipboard.writeText({payload});</script>",
            height=0,
        )


def _copy_button(key: str, text: str) -> None:
    actions: dict[str, CopyAction] = st.session_state.copy_actions
    if key not in actions:
        actions[key] = CopyAction(StreamlitClipboard(), ack_seconds=config.ui.copy_ack_seconds)
    action = actions[key]
    if st.button("Copy", key=f"copy_{key}", help="Copy to clipboard"):
        action.copy(text)
    if action.copied:
        st.caption(":green[Copied!]")


def _render_md(text: str) -> None:
    st.markdown(to_html(text), unsafe_allow_html=True)


# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------

with st.sidebar:
    st.title(config.ui.page_title)
    st.caption(f"Hiring kits and candidate screening for {config.brand.name}")

    view = st.radio("View", ["Generator", "Chat"], index=0)

    st.divider()
    st.caption("Session usage")
    st.caption(summarize_usage(st.session_state.llm.peek_token_summary()))
    st.divider()
    st.caption("Powered by Claude")


# ---------------------------------------------------------------------------
# View A: Generator
# ---------------------------------------------------------------------------


def _view_generator():
    st.header("Hiring Kit Generator")

    screen.company_context = st.text_area(
        "Company Context",
        value=screen.company_context,
        height=140,
        help=(
            "This context is used to tailor all generated content. "
            f"It's pre-filled for {config.brand.name}, but you can edit it."
        ),
        placeholder="e.g., We are a media house focused on...",
        disabled=screen.busy,
    )

    st.markdown("**Quick Start Templates**")
    st.caption(f"Select a common role to populate the notes with a detailed template for {config.brand.name}.")
    roles = screen.presets.roles if screen.presets else []
    if roles:
        cols = st.columns(len(roles))
        for col, role in zip(cols, roles):
            with col:
                if st.button(role.label, key=f"preset_{role.id}", disabled=screen.busy):
                    screen.apply_preset(role.id)
                    st.rerun()

    levels = [s.value for s in Seniority]
    chosen = st.radio(
        "Seniority Level",
        levels,
        index=levels.index(screen.seniority.value),
        horizontal=True,
        help="Adjusts the requirements, responsibilities, and interview questions.",
        disabled=screen.busy,
    )
    screen.set_seniority(chosen)

    screen.notes = st.text_area(
        "Job Notes",
        value=screen.notes,
        height=220,
        placeholder="e.g., Social Media Manager, focus on YouTube community, shorts, and Instagram reels...",
        disabled=screen.busy,
    )

    col_kit, col_onboarding = st.columns(2)
    with col_kit:
        if st.button("Generate Hiring Kit", type="primary", disabled=screen.busy):
            with st.spinner("Generating Hiring Kit..."):
                _run(screen.generate_kit())
            st.rerun()
    with col_onboarding:
        if screen.show_onboarding_action:
            if st.button("Generate Onboarding Plan", disabled=screen.busy):
                with st.spinner("Generating Plan..."):
                    _run(screen.generate_onboarding())
                st.rerun()

    if screen.error:
        st.error(screen.error)
    if screen.onboarding_error:
        st.error(screen.onboarding_error)

    if screen.kit is not None:
        _render_kit()


def _render_kit():
    kit = screen.kit
    st.divider()

    dl_cols = st.columns(2)
    with dl_cols[0]:
        st.download_button(
            label="Download Markdown",
            data=render_kit_markdown(kit, screen.analysis).encode("utf-8"),
            file_name=export_filename(screen.notes, "md"),
            mime="text/markdown",
            type="secondary",
        )
    with dl_cols[1]:
        st.download_button(
            label="Download HTML",
            data=render_kit_html(kit, screen.analysis).encode("utf-8"),
            file_name=export_filename(screen.notes, "html"),
            mime="text/html",
            type="secondary",
        )

    tabs = screen.available_tabs
    active = screen.active_tab if screen.active_tab in tabs else Tab.JOB_DESCRIPTION
    choice = st.radio(
        "Section",
        tabs,
        index=tabs.index(active),
        format_func=lambda t: TAB_LABELS[t],
        horizontal=True,
        label_visibility="collapsed",
    )
    screen.select_tab(choice)

    if screen.active_tab is Tab.JOB_DESCRIPTION:
        _copy_button("jd", kit.job_description)
        _render_md(kit.job_description)

    elif screen.active_tab is Tab.SCORECARD:
        _copy_button("scorecard", scorecard_to_text(kit.interview_scorecard))
        for i, item in enumerate(kit.interview_scorecard, 1):
            with st.container(border=True):
                st.subheader(f"{i}. {item.competency}")
                q_col, r_col = st.columns(2)
                with q_col:
                    st.markdown("**Behavioral Questions**")
                    for q in item.questions:
                        st.markdown(f"- {q}")
                with r_col:
                    st.markdown("**Scoring Rubric**")
                    st.markdown(f":red[**Weak:**] {item.scoring_rubric.weak}")
                    st.markdown(f":orange[**Average:**] {item.scoring_rubric.average}")
                    st.markdown(f":green[**Strong:**] {item.scoring_rubric.strong}")

    elif screen.active_tab is Tab.EMAILS:
        next_col, reject_col = st.columns(2)
        with next_col:
            st.subheader("Next Steps Email")
            _copy_button("email_next", kit.email_templates.next_steps)
            _render_md(kit.email_templates.next_steps)
        with reject_col:
            st.subheader("Rejection Email")
            _copy_button("email_rejection", kit.email_templates.rejection)
            _render_md(kit.email_templates.rejection)

    elif screen.active_tab is Tab.ONBOARDING and kit.onboarding_plan is not None:
        plan = kit.onboarding_plan
        _copy_button("onboarding", onboarding_to_text(plan))
        cols = st.columns(3)
        for col, title, body in zip(
            cols,
            ("First 30 Days", "Days 31-60", "Days 61-90"),
            (plan.day30, plan.day60, plan.day90),
        ):
            with col:
                with st.container(border=True):
                    st.subheader(title)
                    _render_md(body)

    elif screen.active_tab is Tab.SCREENER:
        _render_screener()


MATCH_COLORS = {"strong match": "green", "good match": "blue", "potential gap": "orange"}


def _render_screener():
    st.subheader("Candidate Screener")
    st.caption("Paste a resume to compare it against this job description and scorecard.")
    screen.resume_text = st.text_area(
        "Resume",
        value=screen.resume_text,
        height=220,
        placeholder="Paste resume text here...",
        disabled=screen.busy,
        label_visibility="collapsed",
    )
    if st.button(
        "Analyze Resume",
        type="primary",
        disabled=screen.busy or not screen.resume_text.strip(),
    ):
        with st.spinner("Analyzing..."):
            _run(screen.analyze_resume())
        st.rerun()

    if screen.analysis_error:
        st.error(screen.analysis_error)

    analysis = screen.analysis
    if analysis is None:
        return

    st.markdown("**Summary**")
    st.info(analysis.summary)

    st.markdown("**Competency Alignment**")
    for m in analysis.competency_matches:
        color = MATCH_COLORS.get(m.match.strip().lower(), "gray")
        with st.container(border=True):
            st.markdown(f"**{m.competency}** :{color}[{m.match}]")
            st.caption(m.evidence)

    st.markdown("**Suggested Interview Questions**")
    for q in analysis.suggested_questions:
        st.markdown(f"- {q}")


# ---------------------------------------------------------------------------
# View B: Chat
# ---------------------------------------------------------------------------


def _view_chat():
    st.header("Recruitment Assistant")

    if "chat_screen" not in st.session_state:
        st.session_state.chat_screen = ChatScreen(st.session_state.generator.start_chat())
    chat: ChatScreen = st.session_state.chat_screen

    for msg in chat.messages:
        with st.chat_message("user" if msg.role == "user" else "assistant"):
            st.markdown(msg.text)

    prompt = st.chat_input("Ask me anything...", disabled=chat.loading)
    if prompt and prompt.strip():
        with st.chat_message("user"):
            st.markdown(prompt)
        with st.chat_message("assistant"):
            placeholder = st.empty()
            placeholder.markdown("...")
            _run(chat.send(prompt, on_update=lambda m: placeholder.markdown(m.text)))


# ---------------------------------------------------------------------------
# Main router
# ---------------------------------------------------------------------------

if view == "Generator":
    _view_generator()
else:
    _view_chat()
