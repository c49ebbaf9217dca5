"""
Funciones de formateo.
Conversión y presentación de datos.
"""
from typing import Optional, Tuple
import re

from app.utils.constants import PAISES, CODIGO_PAIS_DEFAULT, URL_WHATSAPP


_CARACTERES_TELEFONO = re.compile(r"[\s\-\(\)]")

CODIGOS_PAIS = tuple(pais["code"] for pais in PAISES)


# ============================================
# FORMATEO DE TELÉFONOS
# ============================================

def limpiar_telefono(numero: Optional[str]) -> str:
    """
    Elimina espacios, guiones y paréntesis de un teléfono.

    Examples:
        >>> limpiar_telefono("(504) 9999-8888")
        '50499998888'
    """
    if not numero:
        return ""
    return _CARACTERES_TELEFONO.sub("", numero)


def crear_url_whatsapp(numero: Optional[str], codigo_pais: Optional[str] = None) -> str:
    """
    Crea el enlace de WhatsApp para un teléfono.

    Args:
        numero: Teléfono (con o sin formato)
        codigo_pais: Código de país separado, si se conoce

    Returns:
        URL de wa.me, o '#' si no hay teléfono
    """
    if not numero:
        return "#"

    limpio = limpiar_telefono(numero)
    if codigo_pais:
        limpio = codigo_pais + limpio
    elif limpio.startswith("+"):
        limpio = limpio[1:]

    return f"{URL_WHATSAPP}{limpio}"


def formatear_telefono(numero: Optional[str], codigo_pais: Optional[str] = None) -> str:
    """
    Formatea un teléfono para mostrar.

    - Con código de país separado: "+CCC numero"
    - Con '+' ya presente: se deja igual
    - Empieza con un código conocido y tiene 10+ dígitos: se antepone '+'
    - En otro caso se devuelve tal cual (no se asume país)
    """
    if not numero:
        return ""

    if codigo_pais:
        return f"+{codigo_pais} {numero}"

    limpio = limpiar_telefono(numero)
    if limpio.startswith("+"):
        return numero

    if len(limpio) >= 10 and any(limpio.startswith(codigo) for codigo in CODIGOS_PAIS):
        return f"+{limpio}"

    return numero


def separar_codigo_pais(
    numero: Optional[str],
    codigo_pais: Optional[str] = None
) -> Tuple[str, str]:
    """
    Separa código de país y número.

    Soporta el formato antiguo combinado ("+504 9999-8888").

    Returns:
        Tupla (codigo_pais, numero)
    """
    if codigo_pais:
        return codigo_pais, numero or ""

    if not numero:
        return CODIGO_PAIS_DEFAULT, ""

    sin_mas = numero[1:] if numero.startswith("+") else numero
    partes = sin_mas.split(" ")
    if len(partes) >= 2 and partes[0] in CODIGOS_PAIS:
        return partes[0], " ".join(partes[1:])

    return CODIGO_PAIS_DEFAULT, numero
