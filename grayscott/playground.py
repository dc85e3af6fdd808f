import streamlit as st
import numpy as np
import pandas as pd
import altair as alt

from grayscott.capture import CaptureError, resample_nearest
from grayscott.params import (
    DEFAULT_CAPTURE_FPS,
    DEFAULT_CAPTURE_SCALE,
    DEFAULT_CAPTURE_SECONDS,
    DEFAULT_GRID_SIZE,
    DEFAULT_PARAMS,
    DEFAULT_SEED,
    PRESETS,
)
from grayscott.session import SimulationSession

DISPLAY_SIZE = 640
CUSTOM = "— Custom —"


def app():
    st.title("Reaction–Diffusion Playground")
    st.markdown("""
    **Simulation Details:**
    * **Model:** Gray–Scott, two species *U* and *V* diffusing and reacting on a periodic grid.
    * **Dynamics:** Feed (*F*), kill (*k*) and diffusion rates (*Dᵤ*, *Dᵥ*) select spots, stripes or mazes.
    * **Visualization:** R≈V, G≈U, B≈1−U.
    """)

    # -----------------------------
    # 1. SESSION (owner of the grid)
    # -----------------------------
    if "gs_session" not in st.session_state:
        st.session_state.gs_session = SimulationSession(
            n=DEFAULT_GRID_SIZE, params=DEFAULT_PARAMS, seed=DEFAULT_SEED, running=False
        )
        st.session_state.gs_preset = CUSTOM
    session = st.session_state.gs_session
    current = session.params.current()

    # -----------------------------
    # 2. PARAMETERS (Sidebar)
    # -----------------------------
    st.sidebar.subheader("Preset")
    preset_names = [CUSTOM] + list(PRESETS.keys())
    preset = st.sidebar.selectbox(
        "Pattern", preset_names, index=preset_names.index(st.session_state.gs_preset)
    )
    if preset != st.session_state.gs_preset:
        st.session_state.gs_preset = preset
        if preset != CUSTOM:
            session.apply_preset(preset)
            st.rerun()

    st.sidebar.subheader("Physics Parameters")
    Du = st.sidebar.slider("Dᵤ (Du)", 0.0, 1.0, float(current.Du), step=0.01)
    Dv = st.sidebar.slider("Dᵥ (Dv)", 0.0, 1.0, float(current.Dv), step=0.01)
    F = st.sidebar.slider("F (feed)", 0.0, 0.1, float(current.F), step=0.001, format="%.3f")
    k = st.sidebar.slider("k (kill)", 0.0, 0.1, float(current.k), step=0.001, format="%.3f")

    st.sidebar.subheader("System Settings")
    steps_per_frame = st.sidebar.slider("Steps/frame", 1, 50, int(current.steps_per_frame))
    grid_n = st.sidebar.slider("Grid N", 64, 512, session.n, step=32)
    seed = st.sidebar.text_input("Seed", value=session.seed)

    changed = (Du, Dv, F, k, steps_per_frame) != (
        current.Du, current.Dv, current.F, current.k, current.steps_per_frame
    )
    if changed:
        session.set_params(Du=Du, Dv=Dv, F=F, k=k, steps_per_frame=steps_per_frame)
        if preset != CUSTOM and (Du, Dv, F, k) != (
            PRESETS[preset].Du, PRESETS[preset].Dv, PRESETS[preset].F, PRESETS[preset].k
        ):
            st.session_state.gs_preset = CUSTOM
    if grid_n != session.n:
        session.set_grid_size(grid_n)
    if seed != session.seed:
        session.reseed(seed)

    col_a, col_b = st.sidebar.columns(2)
    if col_a.button("Reseed"):
        session.reseed()
        st.rerun()
    if col_b.button("Randomize seed"):
        session.randomize_seed()
        st.rerun()
    if st.sidebar.button("Reset & Run"):
        session.reseed()
        session.play()
        st.rerun()

    # Parameter summary strip
    p = session.params.current()
    summary = st.columns(6)
    for col, (label, val) in zip(
        summary,
        [("Du", p.Du), ("Dv", p.Dv), ("F", p.F), ("k", p.k), ("dt", p.dt), ("steps", p.steps_per_frame)],
    ):
        col.metric(label, f"{float(val):.3f}")

    # -----------------------------
    # 3. LAYOUT
    # -----------------------------
    col_vis, col_stats = st.columns([2, 1])
    with col_vis:
        image_placeholder = st.empty()
        st.caption("Color mapping: R≈V, G≈U, B≈1−U.")
    with col_stats:
        st.write("### Mean Concentrations")
        chart_placeholder = st.empty()

    run_sim = st.toggle("Run Simulation", value=session.running)
    if run_sim != session.running:
        session.toggle()

    # -----------------------------
    # 4. EXPORT (capture session)
    # -----------------------------
    with st.expander("Export GIF"):
        seconds = st.number_input("Seconds", 0.1, 30.0, DEFAULT_CAPTURE_SECONDS, step=0.5)
        fps = st.number_input("FPS", 1, 60, DEFAULT_CAPTURE_FPS)
        scale = st.number_input("Scale", 0.25, 4.0, DEFAULT_CAPTURE_SCALE, step=0.25)
        if st.button("Capture"):
            progress = st.progress(0.0, text="Capturing frames...")
            try:
                result = session.capture(
                    seconds, fps, scale=scale,
                    on_frame=lambda i, total: progress.progress(i / total, text=f"Frame {i}/{total}"),
                )
            except CaptureError as exc:
                st.error(f"Capture failed: {exc}")
            else:
                st.session_state.gs_capture = result.data
                st.success(
                    f"Captured {len(result.frames)} frames at {result.size}×{result.size}, "
                    f"{result.delay_ms} ms per frame."
                )
        if st.session_state.get("gs_capture"):
            st.download_button(
                "Download GIF",
                data=st.session_state.gs_capture,
                file_name=f"gray-scott-{session.seed}.gif",
                mime="image/gif",
            )

    # -----------------------------
    # 5. MAIN SIMULATION LOOP
    # -----------------------------
    pixels = session.tick()

    upscale = max(1, DISPLAY_SIZE // session.n)
    image_placeholder.image(
        resample_nearest(pixels, session.n * upscale),
        caption=f"Iterations: {session.iterations}  |  Seed: {session.seed}",
    )

    # -----------------------------
    # 6. GRAPH (ALTAIR)
    # -----------------------------
    if len(session.history) > 0:
        hist = np.array(session.history)
        df = pd.DataFrame({
            "Iteration": hist[:, 0],
            "Mean U": hist[:, 1],
            "Mean V": hist[:, 2],
        })
        df_melt = df.melt("Iteration", var_name="Species", value_name="Concentration")

        chart = alt.Chart(df_melt).mark_line().encode(
            x=alt.X("Iteration"),
            y=alt.Y("Concentration", scale=alt.Scale(domain=[0, 1])),
            color=alt.Color(
                "Species",
                scale=alt.Scale(domain=["Mean U", "Mean V"], range=["#33FF33", "#FF3333"]),
            ),
            tooltip=["Iteration", "Species", "Concentration"],
        ).properties(height=300).interactive()

        chart_placeholder.altair_chart(chart, use_container_width=True)
    else:
        chart_placeholder.info("Start the simulation to record concentrations.")

    st.markdown("---")
    st.markdown("**Model**")
    st.latex(r"u_t = D_u \nabla^2 u - u v^2 + F (1 - u)")
    st.latex(r"v_t = D_v \nabla^2 v + u v^2 - (F + k) v")

    if session.playing:
        st.rerun()


if __name__ == "__main__":
    app()
