# --------------------------------------------------------------
# File: 2_Cifrado_AES.py
# Description: Cifra y descifra texto con AES-GCM desde Streamlit.
# --------------------------------------------------------------

import streamlit as st

from cryptokit.crypto_sym import generate_aes_key
from cryptokit.encoding import from_hex, to_hex
from cryptokit.errors import CryptoError
from cryptokit.services import decrypt_text, encrypt_text

st.title("🔒 Cifrado AES-GCM")

# SECURITY: la clave se conserva sólo en la sesión actual.
if "aes_key_hex" not in st.session_state:
    st.session_state["aes_key_hex"] = to_hex(generate_aes_key())

bits = st.selectbox("Tamaño de clave", [256, 192, 128])
if st.button("Generar clave nueva"):
    st.session_state["aes_key_hex"] = to_hex(generate_aes_key(bits))

key_hex = st.text_input("Clave (hex)", key="aes_key_hex")
aad = st.text_input("Datos asociados (opcional)").encode("utf-8") or None

tab_enc, tab_dec = st.tabs(["Cifrar", "Descifrar"])

with tab_enc:
    plaintext = st.text_area("Texto en claro", key="aes_plain")
    if st.button("Cifrar", key="btn_aes_enc"):
        try:
            token = encrypt_text(from_hex(key_hex), plaintext, aad)
        except CryptoError as exc:
            st.error(str(exc))
        else:
            st.success("Texto cifrado (nonce 96 bits | tag 128 bits).")
            st.code(token)

with tab_dec:
    token_in = st.text_area("Sobre en Base64", key="aes_token")
    if st.button("Descifrar", key="btn_aes_dec"):
        try:
            st.code(decrypt_text(from_hex(key_hex), token_in.strip(), aad))
        except CryptoError as exc:
            st.error(str(exc))
