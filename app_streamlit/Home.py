# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen de utilidades.
# --------------------------------------------------------------

import streamlit as st

from cryptokit import __version__
from cryptokit.logs import setup_logging

# Activa el logging estructurado de la aplicación según la configuración.
setup_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="cryptokit", page_icon="🔐", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔐 cryptokit")
st.caption(f"Versión {__version__}")
st.write(
    "Utilidades de hash SHA-256/512, cifrado autenticado AES-GCM y cifrado "
    "RSA-OAEP sobre claves proporcionadas por el usuario."
)
st.info("Las claves sólo viven en la sesión del navegador; nada se guarda en disco.")
