# evento_api/domain/documento/digitos.py
from __future__ import annotations

from .enums import TipoDocumento

_PESOS_CPF_1 = (10, 9, 8, 7, 6, 5, 4, 3, 2)
_PESOS_CPF_2 = (11, 10, 9, 8, 7, 6, 5, 4, 3, 2)
# Pesos ciclicos 2..9 atribuidos da direita para a esquerda
_PESOS_CNPJ_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_PESOS_CNPJ_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def apenas_digitos(texto: str) -> str:
    """Remove tudo que nao for 0-9. '111.444.777-35' -> '11144477735'."""
    return "".join(c for c in texto if "0" <= c <= "9")


def digitos_repetidos(digitos: str) -> bool:
    """Sequencias como 00000000000 sao valores de teste e sempre invalidas."""
    return len(set(digitos)) == 1


def _soma_ponderada(digitos: str, pesos: tuple[int, ...]) -> int:
    return sum(int(d) * p for d, p in zip(digitos, pesos))


def _dv_cpf(digitos: str, pesos: tuple[int, ...]) -> int:
    resto = (_soma_ponderada(digitos, pesos) * 10) % 11
    return 0 if resto >= 10 else resto


def _dv_cnpj(digitos: str, pesos: tuple[int, ...]) -> int:
    resto = _soma_ponderada(digitos, pesos) % 11
    return 0 if resto < 2 else 11 - resto


def calcular_digitos_verificadores(tipo: TipoDocumento, base: str) -> str:
    """Calcula os dois digitos verificadores para a base do documento.

    Args:
        tipo: CPF (base de 9 digitos) ou CNPJ (base de 12 digitos).
        base: apenas digitos, sem os verificadores.

    Raises:
        ValueError: se a base nao tiver o comprimento esperado.
    """
    esperado = tipo.comprimento - 2
    if len(base) != esperado or apenas_digitos(base) != base:
        raise ValueError(
            f"Base de {tipo.rotulo} invalida: esperado {esperado} digitos, recebido {base!r}"
        )

    if tipo is TipoDocumento.CPF:
        d1 = _dv_cpf(base, _PESOS_CPF_1)
        d2 = _dv_cpf(base + str(d1), _PESOS_CPF_2)
    else:
        d1 = _dv_cnpj(base, _PESOS_CNPJ_1)
        d2 = _dv_cnpj(base + str(d1), _PESOS_CNPJ_2)
    return f"{d1}{d2}"


def validar_cpf(digitos: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CPF (modulo 11)."""
    if len(digitos) != 11 or digitos_repetidos(digitos):
        return False
    return calcular_digitos_verificadores(TipoDocumento.CPF, digitos[:9]) == digitos[9:]


def validar_cnpj(digitos: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CNPJ (modulo 11)."""
    if len(digitos) != 14 or digitos_repetidos(digitos):
        return False
    return calcular_digitos_verificadores(TipoDocumento.CNPJ, digitos[:12]) == digitos[12:]


def validar(tipo: TipoDocumento, texto: str) -> bool:
    """Valida CPF ou CNPJ a partir de texto livre. Nunca levanta excecao.

    A pontuacao e removida internamente, entao pode ser chamada a cada tecla
    digitada: texto incompleto simplesmente retorna False.
    """
    digitos = apenas_digitos(texto)
    if tipo is TipoDocumento.CPF:
        return validar_cpf(digitos)
    return validar_cnpj(digitos)


def detectar_tipo(texto: str) -> TipoDocumento | None:
    """CPF para 11 digitos, CNPJ para 14, None para qualquer outro comprimento."""
    n = len(apenas_digitos(texto))
    for tipo in TipoDocumento:
        if tipo.comprimento == n:
            return tipo
    return None
