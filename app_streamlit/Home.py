# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen de la herramienta.
# --------------------------------------------------------------

import streamlit as st

from core.config import configure_logging

configure_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="Secure Payload Decoder", page_icon="🛡️", layout="centered")

# Presenta el nombre de la herramienta y su propósito general.
st.title("🛡️ Secure Payload Decoder")
st.write(
    "Herramienta local para cifrar y descifrar payloads con `aes-256-gcm` "
    "en el mismo formato que `cipher.NewGCM` de Go: `base64(nonce ‖ ciphertext ‖ tag)`."
)
st.info("Ve a **Cifrar y Descifrar** para probar la compatibilidad con tu backend.")
