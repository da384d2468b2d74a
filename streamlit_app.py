import logging

import streamlit as st

from config import parse_args
from ui.disease_detection import render_disease_detection

logging.basicConfig(level=logging.INFO)


def main():
    st.set_page_config(
        page_title="Plant Disease Detection",
        page_icon="🌿",
        layout="wide",
    )
    render_disease_detection(parse_args())


if __name__ == "__main__":
    main()
