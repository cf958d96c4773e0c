# --------------------------------------------------------------
# File: 3_Cifrado_RSA.py
# Description: Genera pares RSA y cifra mensajes cortos con OAEP en Streamlit.
# --------------------------------------------------------------

import streamlit as st

from cryptokit import config
from cryptokit.crypto_asym import rsa_generate_keypair, rsa_max_plaintext_size
from cryptokit.errors import CryptoError
from cryptokit.services import rsa_decrypt_text, rsa_encrypt_text

st.title("🗝️ Cifrado RSA-OAEP")

sizes = [s for s in (2048, 3072, 4096) if s >= config.RSA_MIN_KEY_SIZE]
size = st.selectbox("Tamaño del módulo", sizes, index=min(1, len(sizes) - 1))
if st.button("Generar par de claves"):
    with st.spinner("Generando claves..."):
        pair = rsa_generate_keypair(size)
    st.session_state["rsa_pair"] = pair

pair = st.session_state.get("rsa_pair")
if pair is None:
    st.info("Genera un par de claves para continuar.")
    st.stop()

st.code(pair.public_pem.decode("ascii"))
st.caption(f"Máximo por mensaje: {rsa_max_plaintext_size(pair.public_pem)} bytes")

tab_enc, tab_dec = st.tabs(["Cifrar", "Descifrar"])

with tab_enc:
    plaintext = st.text_area("Mensaje", key="rsa_plain")
    if st.button("Cifrar", key="btn_rsa_enc"):
        try:
            st.code(rsa_encrypt_text(pair.public_pem, plaintext))
        except CryptoError as exc:
            st.error(str(exc))

with tab_dec:
    token = st.text_area("Ciphertext en Base64", key="rsa_token")
    if st.button("Descifrar", key="btn_rsa_dec"):
        try:
            st.code(rsa_decrypt_text(pair.private_pem, token.strip()))
        except CryptoError as exc:
            st.error(str(exc))
