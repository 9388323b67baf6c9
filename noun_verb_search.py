from errors import AddressError, SearchError
from intcode import IntCode

SEARCH_LIMIT = 100

def patch_noun_and_verb(program, noun, verb):
    """Devolve uma cópia do programa com o substantivo em 1 e o verbo em 2."""
    if len(program) < 3:
        raise AddressError(f"Programa curto demais para receber substantivo e verbo ({len(program)} posições)")
    patched = list(program)
    patched[1] = noun
    patched[2] = verb
    return patched

def run_with_noun_and_verb(program, noun, verb):
    memory = IntCode(patch_noun_and_verb(program, noun, verb)).run_until_halt()
    return memory[0]

def find_noun_and_verb(program, needle, limit=SEARCH_LIMIT):
    """
    Procura o primeiro par (substantivo, verbo) em [0, limit) que faz o
    programa deixar `needle` no endereço 0.
    """
    for noun in range(limit):
        for verb in range(limit):
            if run_with_noun_and_verb(program, noun, verb) == needle:
                return noun, verb
    raise SearchError(f"Nenhum par substantivo/verbo produz {needle}")
