import pandas as pd
import streamlit as st

from word_explorer.config import load_settings
from word_explorer.controller import NO_RESULTS, PageController
from word_explorer.datamuse import DatamuseClient
from word_explorer.logs import configure_logging

# --- 1. Page Configuration ---
st.set_page_config(
    page_title="Word Explorer",
    page_icon="📖",
    layout="centered",
    initial_sidebar_state="expanded",
)

settings = load_settings()
configure_logging(settings.log_level)

# --- 2. Session State Initialization ---
if "controller" not in st.session_state:
    st.session_state.controller = PageController(DatamuseClient.from_settings(settings))
if "word_input" not in st.session_state:
    st.session_state.word_input = ""

controller: PageController = st.session_state.controller


# --- 3. Callbacks ---

def _show_rhymes() -> None:
    controller.show_rhymes(st.session_state.word_input)


def _show_similar() -> None:
    controller.show_similar(st.session_state.word_input)


# --- 4. Sidebar: Saved Words ---
with st.sidebar:
    st.title("Word Explorer")
    st.caption("Rhymes and similar words from Datamuse")
    st.markdown("---")
    st.subheader("Saved words")
    if controller.saved_words:
        st.write(controller.saved_words_display)
    else:
        st.caption("Nothing saved yet.")

# --- 5. Input ---
st.text_input(
    "Enter a word:",
    key="word_input",
    on_change=_show_rhymes,
    help="Press Enter to look up rhymes.",
)
c1, c2 = st.columns(2)
c1.button("Show rhymes", key="show_rhymes", on_click=_show_rhymes, type="primary", use_container_width=True)
c2.button("Show synonyms", key="show_synonyms", on_click=_show_similar, use_container_width=True)

# --- 6. Output ---
if controller.description:
    st.subheader(controller.description)

view = controller.view
if view is not None:
    if view.is_empty:
        st.info(NO_RESULTS)
    for g, group in enumerate(view.groups):
        if group.heading:
            st.markdown(f"### {group.heading}")
        for w, word in enumerate(group.words):
            col_word, col_save = st.columns([4, 1])
            col_word.write(word)
            col_save.button(
                "Save",
                key=f"save-{g}-{w}-{word}",
                on_click=controller.save_word,
                args=(word,),
            )

    if view.records:
        with st.expander("Raw results"):
            st.dataframe(pd.DataFrame(view.records), use_container_width=True, hide_index=True)
