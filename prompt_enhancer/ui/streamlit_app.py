"""
Streamlit playground that sends prompts to the enhancement API.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import httpx
import streamlit as st

# API URL provided via environment or default localhost
API_URL = os.getenv("API_URL", "http://localhost:3000")


@dataclass
class EnhanceReply:
    text: str
    category: Optional[str] = None
    request_id: Optional[str] = None
    ok: bool = True


def main() -> None:
    st.set_page_config(page_title="Prompt Enhancer", layout="wide")
    st.title("Prompt Enhancer")
    st.caption("Classifies your prompt, then asks the model for a richer version.")

    if "history" not in st.session_state:
        st.session_state.history = []

    input_col, history_col = st.columns([2, 1], gap="large")

    with input_col:
        prompt = st.text_area("Prompt", placeholder="Build me a blog with markdown support")
        if st.button("Enhance", type="primary") and prompt:
            with st.spinner("Contacting API..."):
                reply = call_api(prompt)
            _append_history(prompt, reply)
            if reply.ok:
                if reply.category:
                    st.caption(f"Category: `{reply.category}`")
                st.code(reply.text, language="markdown")
            else:
                st.error(reply.text)

    with history_col:
        _render_history()


def call_api(prompt: str, client: Optional[httpx.Client] = None) -> EnhanceReply:
    owns_client = client is None
    http = client or httpx.Client(base_url=API_URL, timeout=60.0)
    try:
        response = http.get("/enhance", params={"prompt": prompt})
        request_id = response.headers.get("x-request-id")
        if response.is_success:
            return EnhanceReply(
                text=response.text,
                category=response.headers.get("x-prompt-category"),
                request_id=request_id,
            )
        return EnhanceReply(text=_error_text(response), request_id=request_id, ok=False)
    except httpx.RequestError as exc:
        return EnhanceReply(text=f"Failed to reach API: {exc}", ok=False)
    finally:
        if owns_client:
            http.close()


def _error_text(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("error"):
        return f"API error {response.status_code}: {payload['error']}"
    return f"API error {response.status_code}: {response.text}"


def _append_history(prompt: str, reply: EnhanceReply) -> None:
    history: List[Dict[str, Any]] = st.session_state.setdefault("history", [])
    history.append(
        {
            "prompt": prompt,
            "reply": reply.text,
            "category": reply.category,
            "ok": reply.ok,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
    )


def _render_history() -> None:
    st.subheader("History")
    history: List[Dict[str, Any]] = st.session_state.get("history", [])
    if not history:
        st.info("No prompts yet. Enhanced prompts will show up here.")
        return
    for item in reversed(history):
        label = item.get("category") or ("error" if not item.get("ok") else "general")
        with st.expander(f"[{label}] {item['prompt'][:60]}"):
            st.write(item["reply"])


if __name__ == "__main__":
    main()
