import re

from errors import LoadError

INTEGER = re.compile(r"[+-]?[0-9]+")

def parse_program(text):
    """
    Converte o texto de um programa IntCode (inteiros separados por vírgula)
    em uma lista de inteiros. Espaços em volta de cada valor são ignorados,
    assim como valores vazios.
    """
    program = []
    for index, token in enumerate(text.split(',')):
        token = token.strip()
        if not token:
            continue
        if not INTEGER.fullmatch(token):
            raise LoadError(f"Valor inválido na posição {index}: '{token}'", token=token, index=index)
        program.append(int(token))
    return program

def load_program(path):
    try:
        with open(path) as source:
            text = source.read()
    except OSError as e:
        raise LoadError(f"Não foi possível ler o programa '{path}': {e}")
    return parse_program(text)
