import logging

import streamlit as st

from theme import SYSTEM, load_override, resolve_theme, save_override, theme_css
from wetbulb import (
    ACCURATE_RH,
    ACCURATE_T,
    PLACEHOLDER,
    RH_MAX,
    RH_MIN,
    T_MAX,
    T_MIN,
    estimate,
    format_estimate,
    in_accuracy_band,
)

logger = logging.getLogger(__name__)

st.set_page_config(page_title="Wet-Bulb Calculator", page_icon="🌡️", layout="centered")

THEME_OPTIONS = ["System", "Light", "Dark"]


def system_theme():
    """Browser's preferred colour scheme, or None when it is not reported."""
    return st.context.theme.type


# ---------- UI ----------
st.title("🌡️ Wet-Bulb Calculator (DBT + RH)")
st.caption("Enter dry-bulb temperature and relative humidity to estimate the wet-bulb temperature.")

with st.sidebar:
    st.header("Inputs")
    t_db = st.slider("Dry-bulb temperature (°C)", min_value=T_MIN, max_value=T_MAX,
                     value=25.0, step=0.1, key="temperature")
    rh = st.slider("Relative humidity (%)", min_value=RH_MIN, max_value=RH_MAX,
                   value=50.0, step=0.1, key="humidity")

    st.markdown("---")
    st.header("Display")
    stored = load_override()
    choice = st.radio(
        "Theme",
        THEME_OPTIONS,
        index=THEME_OPTIONS.index(stored.capitalize()) if stored else 0,
        key="theme",
        horizontal=True,
        help="System follows your browser's light/dark setting.",
    ).lower()
    override = None if choice == SYSTEM else choice
    if override != stored:
        try:
            save_override(override)
        except OSError as exc:
            logger.warning("Could not save theme preference: %s", exc)
            st.warning("Theme choice could not be saved; it applies to this session only.")

st.markdown(theme_css(resolve_theme(override, system_theme())), unsafe_allow_html=True)

t_wb = estimate(t_db, rh)

st.subheader("Result")
if t_wb is None:
    st.metric("Wet-bulb temperature", PLACEHOLDER)
else:
    st.metric("Wet-bulb temperature", f"{format_estimate(t_wb)} °C",
              delta=f"{t_wb - t_db:0.1f} °C vs dry-bulb", delta_color="off")

if not in_accuracy_band(t_db, rh):
    st.warning(
        f"Inputs are outside {ACCURATE_T[0]:g}–{ACCURATE_T[1]:g} °C / "
        f"{ACCURATE_RH[0]:g}–{ACCURATE_RH[1]:g} %; the ±1 °C accuracy of the approximation does not apply."
    )

st.markdown("---")
with st.expander("Equations & Method"):
    st.markdown(rf"""
**Stull (2011) empirical approximation:**
\[
s = \sqrt{{RH + 8.313659}}
\]
\[
T_{{wb}} = T\,\arctan(0.151977\,s) + \arctan(T + RH) - \arctan(RH - 1.676331)
+ 0.00391838\,RH^{{3/2}}\arctan(0.023101\,RH) - 4.686035
\]

- \(T\) in °C, \(RH\) in %, \(\arctan\) evaluated in radians.
- Inputs are clamped to \([{T_MIN:g}, {T_MAX:g}]\) °C and \([{RH_MIN:g}, {RH_MAX:g}]\) %.
- Accurate to ±1 °C for \({ACCURATE_T[0]:g} \le T \le {ACCURATE_T[1]:g}\) °C and
  \({ACCURATE_RH[0]:g} \le RH \le {ACCURATE_RH[1]:g}\) %.
""")

st.markdown("---")
st.caption("Tip: the theme choice is saved locally and restored next time the app starts.")
