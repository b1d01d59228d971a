# -----------------------------------------------------------------------------
# Streamlit Frontend for the Quadratic Solver
# Purpose:
#   Minimal UI to enter a, b, c as text, call the API's /solve endpoint, and
#   render the root lines, summary, residual check and trace.
# -----------------------------------------------------------------------------

import json, os, requests, streamlit as st
from dotenv import load_dotenv

# Load .env to pick API_URL at runtime for local/remote backends
load_dotenv()
API_URL = os.getenv("API_URL", "http://127.0.0.1:8000")

st.set_page_config(page_title="Quadratic Solver", layout="centered")
st.title("Quadratic Solver: a·x² + b·x + c = 0")

with st.sidebar:
    st.subheader("Accepted input")
    st.write("Plain decimals only, e.g. `-2.75`. Scientific notation such as `1e2` is rejected, "
             "and `a` may not be zero.")

with st.form("coefficients"):
    col_a, col_b, col_c = st.columns(3)
    a = col_a.text_input("a", value="1")
    b = col_b.text_input("b", value="5")
    c = col_c.text_input("c", value="4")
    submit = st.form_submit_button("Solve")

if submit:
    with st.spinner("Solving..."):
        try:
            r = requests.post(f"{API_URL}/solve", json={"a": a, "b": b, "c": c}, timeout=10)
        except requests.RequestException as e:
            st.error(f"API unreachable at {API_URL}: {e}")
            st.stop()
    if r.status_code != 200:
        st.error(f"Solve error ({r.status_code}): {r.text}")
        st.stop()

    res = r.json()
    if not res.get("ok", False):
        # Failure path: show the PrecisionError message and what was traced
        st.error(f"{res.get('error')} ({res.get('error_kind', 'unknown')})")
        with st.expander("Trace"):
            st.code(json.dumps(res.get("trace", []), indent=2))
    else:
        st.success(res["summary"])
        st.code("\n".join(res["lines"]), language="text")
        st.caption(f"Discriminant: {res['discriminant']}")
        st.subheader("Residual check")
        st.write("passed" if res.get("verified") else "failed")
        st.table([{"root": k, "relative residual": v} for k, v in res.get("residuals", {}).items()])
        with st.expander("Trace"):
            st.code(json.dumps(res["trace"], indent=2))
        if res.get("trace_path"):
            st.caption(f"Trace saved to {res['trace_path']}")
