import streamlit as st

# -------------------------------------------------------------------------
# PAGE CONFIGURATION
# -------------------------------------------------------------------------
st.set_page_config(
    page_title="Reaction–Diffusion Playground",
    page_icon="🧪",
    layout="wide",
    initial_sidebar_state="expanded"
)

# -------------------------------------------------------------------------
# MODULE IMPORTS
# -------------------------------------------------------------------------
from grayscott import playground

modules = {"Gray–Scott Playground": playground}

# -------------------------------------------------------------------------
# SIDEBAR NAVIGATION
# -------------------------------------------------------------------------
st.sidebar.title("Reaction–Diffusion")

options = ["Home"] + list(modules.keys())
page = st.sidebar.radio("Select Page:", options, index=1)

st.sidebar.markdown("---")

# -------------------------------------------------------------------------
# MAIN ROUTING
# -------------------------------------------------------------------------
if page == "Home":
    st.title("Reaction–Diffusion Playground")
    st.markdown("### Gray–Scott Pattern Formation on a Periodic Grid")
    st.markdown("---")

    col1, col2 = st.columns([2, 1])

    with col1:
        st.markdown("""
        The Gray–Scott model describes two chemical species, *U* and *V*, that diffuse and react over space.
        Their concentrations evolve according to a pair of partial differential equations; changing the feed (*F*),
        kill (*k*), and diffusion rates (*Dᵤ*, *Dᵥ*) produces spots, stripes, or maze-like patterns.
        See the [Wikipedia page](https://en.wikipedia.org/wiki/Reaction%E2%80%93diffusion_system) for more background.

        #### Tips:
        * Increase *Steps/frame* to speed up pattern formation.
        * Try presets, then fine-tune *F* and *k* for spots vs stripes.
        * Higher *Grid N* is slower but crisper.
        * Use **Export GIF** to capture an animation of the running pattern.
        """)

        st.info("👈 **Select the playground from the sidebar to begin.**")

    with col2:
        st.markdown("### Model")
        st.latex(r"u_t = D_u \nabla^2 u - u v^2 + F (1 - u)")
        st.latex(r"v_t = D_v \nabla^2 v + u v^2 - (F + k) v")

else:
    if page in modules:
        modules[page].app()
