# --------------------------------------------------------------
# File: 1_Hash.py
# Description: Calcula digests SHA-256/512 de texto o archivos en Streamlit.
# --------------------------------------------------------------

import streamlit as st

from cryptokit.crypto_hash import HashAlgorithm, digest, hash_text
from cryptokit.encoding import to_base64, to_hex
from cryptokit.errors import MissingArgument

st.title("#️⃣ Hash")

algorithm = st.radio("Algoritmo", [a.value for a in HashAlgorithm], horizontal=True)
tab_text, tab_file = st.tabs(["Texto", "Archivo"])

with tab_text:
    target = st.text_area("Texto", key="hash_text")
    salt = st.text_input("Sal (opcional)", key="hash_salt")
    if st.button("Calcular", key="btn_hash_text"):
        try:
            raw = hash_text(target, salt or None, algorithm)
        except MissingArgument as exc:
            st.error(str(exc))
        else:
            st.code(f"hex    {to_hex(raw)}\nbase64 {to_base64(raw)}")

with tab_file:
    upload = st.file_uploader("Selecciona un archivo", type=None)
    if upload and st.button("Calcular", key="btn_hash_file"):
        raw = digest(algorithm, upload.read())
        st.code(f"{algorithm}:{to_hex(raw)}")
