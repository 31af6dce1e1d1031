# --------------------------------------------------------------
# File: 1_Cifrar_y_Descifrar.py
# Description: Vistas de descifrado y simulación de payloads AES-256-GCM.
# --------------------------------------------------------------

import streamlit as st

from core.config import configure_logging
from core.session import TABS, PayloadSession

configure_logging()

TAB_LABELS = {
    "decrypt": "🔓 Cliente: descifrar respuesta",
    "encrypt": "🔒 Simulador: generar datos cifrados",
}

# Claves de los widgets vinculados a los campos de la sesión.
WIDGET_FIELDS = ("secret_key", "active_tab", "encrypted_input", "json_input")


def _session() -> PayloadSession:
    """Recupera la sesión de la herramienta creando el estado inicial si falta.

    Returns:
        PayloadSession: Estado compartido por ambas vistas.
    """
    if "payload_session" not in st.session_state:
        st.session_state["payload_session"] = PayloadSession()
    return st.session_state["payload_session"]


def _bind(field: str) -> str:
    """Restaura la clave del widget desde la sesión si Streamlit la descartó.

    Streamlit elimina el estado de los widgets que no se dibujan en una
    ejecución, como el área de texto de la vista inactiva.

    Args:
        field (str): Nombre del campo de `PayloadSession` y clave del widget.

    Returns:
        str: La misma clave, para pasarla al widget.
    """
    if field not in st.session_state:
        st.session_state[field] = getattr(_session(), field)
    return field


def _synced() -> PayloadSession:
    """Vuelca los valores de los widgets sobre la sesión antes de cada acción.

    Returns:
        PayloadSession: Sesión con los campos actualizados.
    """
    session = _session()
    for field in WIDGET_FIELDS:
        if field not in st.session_state:
            continue
        if field == "active_tab":
            session.switch_tab(st.session_state[field])
        else:
            setattr(session, field, st.session_state[field])
    return session


def _on_decrypt() -> None:
    _synced().run_decrypt()


def _on_encrypt() -> None:
    _synced().run_encrypt()


def _on_send_to_decrypt() -> None:
    # Los widgets se redibujan después del callback con los nuevos valores.
    session = _synced()
    session.send_to_decrypt()
    st.session_state["encrypted_input"] = session.encrypted_input
    st.session_state["active_tab"] = session.active_tab


session = _session()

# Presenta el título y el algoritmo implementado.
st.title("🛡️ Secure Payload Decoder")
st.caption("Implementación local de `aes-256-gcm` compatible con `cipher.NewGCM` de Go.")

# Clave compartida por las dos vistas.
with st.container(border=True):
    st.text_input(
        "🔑 Clave secreta compartida (32 bytes)",
        type="password",
        key=_bind("secret_key"),
        help="Debe coincidir exactamente con la clave del backend.",
    )
    session.secret_key = st.session_state["secret_key"]
    length = session.key_length()
    color = "green" if session.key_is_valid() else "red"
    st.caption(f"Longitud actual: :{color}[**{length}**] bytes.")

# Selector de vista mutuamente excluyente.
st.radio(
    "Vista",
    options=list(TABS),
    format_func=TAB_LABELS.get,
    key=_bind("active_tab"),
    horizontal=True,
    label_visibility="collapsed",
)
session.switch_tab(st.session_state["active_tab"])

if session.active_tab == "decrypt":
    # --- Vista de descifrado ---
    st.text_area(
        "Cadena Base64 cifrada",
        key=_bind("encrypted_input"),
        placeholder="Pega aquí la cadena base64 de la respuesta de tu API...",
        height=130,
    )
    session.encrypted_input = st.session_state["encrypted_input"]
    st.button("🔓 Descifrar payload", key="btn_decrypt", on_click=_on_decrypt)

    if session.decrypt_error:
        st.error(session.decrypt_error)

    result = session.decrypted_result
    if result is not None:
        st.success("Descifrado correctamente.")
        st.caption("Objeto JSON" if result.is_json else "Texto sin formato JSON")
        # st.code incluye el botón de copia al portapapeles.
        st.code(result.pretty(), language="json" if result.is_json else "text")
else:
    # --- Vista del simulador ---
    st.warning(
        "**Modo simulador:** genera cadenas idénticas a las que produciría tu backend en Go. "
        "Copia el resultado en la vista de descifrado para probar el ciclo completo."
    )
    st.text_area("Datos JSON en claro (a ocultar)", key=_bind("json_input"), height=130)
    session.json_input = st.session_state["json_input"]
    st.button("🔒 Cifrar datos", key="btn_encrypt", on_click=_on_encrypt)

    if session.encrypt_error:
        st.error(session.encrypt_error)

    sealed = session.sealed
    if sealed is not None:
        st.markdown("**Ciphertext generado (Base64)**")
        st.code(sealed.ciphertext_b64, language="text", wrap_lines=True)
        st.caption(
            f"AES-GCM-256 | nonce={sealed.nonce_len * 8} bits | tag={sealed.tag_len * 8} bits | "
            f"ct_len={sealed.ciphertext_len} bytes"
        )
        st.button(
            "Probar en la vista de descifrado →",
            key="btn_send_to_decrypt",
            on_click=_on_send_to_decrypt,
        )
