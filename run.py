#!/usr/bin/env python3
"""
Script para iniciar o serviço IntCode ou executar um programa direto do terminal
"""
import os
import sys
import webbrowser
from threading import Timer

HOST = os.environ.get("INTCODE_HOST", "0.0.0.0")
PORT = int(os.environ.get("INTCODE_PORT", "8000"))

def open_browser():
    """Abre o navegador após um pequeno delay"""
    print("🌐 Abrindo navegador...")
    webbrowser.open(f'http://localhost:{PORT}')

def run_file(path, input_value=None):
    """Executa um programa IntCode até o HALT e mostra a última saída"""
    from intcode import IntCode
    from errors import IntCodeError

    try:
        machine = IntCode.load(path, input_value=input_value)
        output = machine.run_to_completion()
    except IntCodeError as e:
        print(f"❌ {type(e).__name__}: {e}")
        sys.exit(1)

    print(f"Saída: {output}")
    print(f"Passos: {machine.steps}")

def serve():
    print("🚀 IntCode Machine")
    print("=" * 50)

    # Verificar se os arquivos necessários existem
    required_files = [
        'main.py', 'intcode.py', 'opcodes.py',
        'memory.py', 'loader.py', 'errors.py'
    ]

    missing_files = []
    for file in required_files:
        if not os.path.exists(file):
            missing_files.append(file)

    if missing_files:
        print("❌ Arquivos necessários não encontrados:")
        for file in missing_files:
            print(f"   - {file}")
        print("\nCertifique-se de ter todos os arquivos do projeto na pasta atual.")
        sys.exit(1)

    if not os.path.exists('static'):
        print("📁 Criando diretório static...")
        os.makedirs('static')

    print("✅ Todos os arquivos encontrados!")
    print(f"🔄 Iniciando servidor FastAPI em {HOST}:{PORT}...")

    # Agendar abertura do navegador
    timer = Timer(2.0, open_browser)
    timer.start()

    try:
        import uvicorn
        uvicorn.run("main:app", host=HOST, port=PORT, reload=True)
    except KeyboardInterrupt:
        print("\n👋 Servidor interrompido. Até logo!")
    except Exception as e:
        print(f"❌ Erro ao iniciar servidor: {e}")

def main():
    if len(sys.argv) > 1:
        input_value = None
        if len(sys.argv) > 2:
            try:
                input_value = int(sys.argv[2])
            except ValueError:
                print(f"❌ Entrada inválida: '{sys.argv[2]}' (deve ser um número inteiro)")
                sys.exit(1)
        run_file(sys.argv[1], input_value)
    else:
        serve()

if __name__ == "__main__":
    main()
