"""passgen -- Streamlit web interface."""

import json
import time

import streamlit as st
import streamlit.components.v1 as components

from passgen import CHARACTER_CLASSES
from passgen.config import MAX_LENGTH, MIN_LENGTH
from passgen.form import (
    change_option,
    expire_copied,
    initial_state,
    mark_copied,
    parse_length,
    regenerate,
)

# ── Lucide icons (from lucide.dev) ────────────────────────────────────────

_LUCIDE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{paths}</svg>'
)

ICON_KEY_ROUND = _LUCIDE.format(s=32, paths=(
    '<path d="M2.586 17.414A2 2 0 0 0 2 18.828V21a1 1 0 0 0 1 1h3'
    'a1 1 0 0 0 1-1v-1a1 1 0 0 1 1-1h1a1 1 0 0 0 1-1v-1'
    'a1 1 0 0 1 1-1h.172a2 2 0 0 0 1.414-.586l.814-.814'
    'a6.5 6.5 0 1 0-4-4z"/>'
    '<circle cx="16.5" cy="7.5" r=".5" fill="currentColor"/>'
))

CLASS_LABELS = {
    "uppercase": "Uppercase Letters (A-Z)",
    "lowercase": "Lowercase Letters (a-z)",
    "numbers": "Numbers (0-9)",
    "symbols": "Symbols (!@#$%^&*)",
}

# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Password Generator",
    page_icon="\U0001f511",
    layout="centered",
)

# ── Form state ────────────────────────────────────────────────────────────

if "form" not in st.session_state:
    st.session_state.form = initial_state()
    opts = st.session_state.form.options
    st.session_state.length_slider = opts.length
    st.session_state.length_input = opts.length
    for _name, _ in CHARACTER_CLASSES:
        st.session_state[f"class_{_name}"] = getattr(opts, _name)

st.session_state.form = expire_copied(st.session_state.form, time.monotonic())


def _on_length(widget_key: str) -> None:
    length = parse_length(st.session_state[widget_key])
    st.session_state.form = change_option(st.session_state.form, "length", length)
    st.session_state.length_slider = length
    st.session_state.length_input = length


def _on_class(name: str) -> None:
    key = f"class_{name}"
    before = st.session_state.form
    after = change_option(before, name, st.session_state[key])
    if after is before:
        # Rejected: keep the last class checked.
        st.session_state[key] = getattr(before.options, name)
        st.session_state.rejected = True
    st.session_state.form = after


def _on_regenerate() -> None:
    st.session_state.form = regenerate(st.session_state.form)


def _on_copy() -> None:
    form = st.session_state.form
    if not form.password:
        return
    st.session_state.form = mark_copied(form, time.monotonic())
    st.session_state.copy_pending = True


def _browser_copy(text: str, nonce: float) -> None:
    """Write *text* to the visitor's clipboard from inside the page."""
    components.html(
        f"<!-- {nonce} --><script>"
        f"navigator.clipboard.writeText({json.dumps(text)})"
        f".catch(e => console.warn('passgen: copy failed', e));"
        f"</script>",
        height=0,
    )


# ── Header ────────────────────────────────────────────────────────────────

st.markdown(
    f'<h1 style="display:flex;align-items:center;gap:10px">'
    f'{ICON_KEY_ROUND} Password Generator</h1>',
    unsafe_allow_html=True,
)
st.caption("Create strong, secure passwords instantly.")

# ── Password ──────────────────────────────────────────────────────────────

form = st.session_state.form
st.code(form.password, language=None)

col_copy, col_regen = st.columns(2)
with col_copy:
    st.button(
        "✓ Copied" if form.copied else "Copy",
        on_click=_on_copy,
        help="Copy to clipboard",
        width="stretch",
    )
with col_regen:
    st.button(
        "Regenerate",
        on_click=_on_regenerate,
        help="Generate new password",
        width="stretch",
    )

if st.session_state.pop("copy_pending", False):
    _browser_copy(form.password, form.copied_at)

st.markdown(
    f"**Strength:** <span style='background:{form.strength.color};"
    f"padding:2px 8px;border-radius:4px;font-size:0.8em'>"
    f"{form.strength.value}</span>",
    unsafe_allow_html=True,
)

# ── Options ───────────────────────────────────────────────────────────────

st.divider()

col_label, col_number = st.columns([3, 1])
with col_label:
    st.markdown(f"Length: **{form.options.length}**")
with col_number:
    st.number_input(
        "Length",
        min_value=MIN_LENGTH,
        max_value=MAX_LENGTH,
        step=1,
        key="length_input",
        on_change=_on_length,
        args=("length_input",),
        label_visibility="collapsed",
    )
st.slider(
    "Length",
    MIN_LENGTH,
    MAX_LENGTH,
    key="length_slider",
    on_change=_on_length,
    args=("length_slider",),
    label_visibility="collapsed",
)

for name, _ in CHARACTER_CLASSES:
    st.checkbox(
        CLASS_LABELS[name],
        key=f"class_{name}",
        on_change=_on_class,
        args=(name,),
    )

if st.session_state.pop("rejected", False):
    st.warning("At least one character type must stay selected.", icon="⚠️")
