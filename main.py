from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.concurrency import run_in_threadpool
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel
from typing import List, Optional
import os

from hull_robot import Color, HullRobot
from intcode import IntCode, OUTPUTS_PER_RESUME
from loader import parse_program
from opcodes import disassemble

app = FastAPI(title="IntCode Machine", version="1.0.0")

# --- Modelos de Dados ---
class CodeRequest(BaseModel):
    code: str

class RunRequest(CodeRequest):
    input_value: Optional[int] = None
    inputs: List[int] = []
    strict_diagnostics: bool = False

class PaintRequest(CodeRequest):
    start_color: int = Color.BLACK.value

def error_payload(e):
    return {"success": False, "errors": [f"{type(e).__name__}: {e}"]}

# --- Sessão interativa ---

async def handle_interactive_session(websocket: WebSocket, code: str, batch_size: int):
    """
    Mantém uma máquina por sessão: cada mensagem de entrada retoma a
    execução até `batch_size` saídas ou até o HALT.
    """
    try:
        machine = IntCode(parse_program(code))
        await websocket.send_json({"type": "execution_started", "batch_size": batch_size})

        while True:
            data = await websocket.receive_json()
            if data.get("type") == "stop":
                break
            if data.get("type") != "input":
                continue

            batch = await run_in_threadpool(machine.resume_with_input, int(data.get("value", 0)), batch_size)
            if batch is None:
                await websocket.send_json({
                    "type": "execution_finished",
                    "success": True,
                    "outputs": machine.all_outputs(),
                    "steps": machine.steps,
                })
                break
            await websocket.send_json({"type": "outputs", "data": list(batch)})

    except WebSocketDisconnect:
        raise
    except Exception as e:
        await websocket.send_json({"type": "execution_finished", "success": False, "error": f"{type(e).__name__}: {e}"})

# --- Endpoints da API ---
@app.websocket("/api/execute-interactive")
async def execute_interactive(websocket: WebSocket):
    await websocket.accept()
    try:
        request = await websocket.receive_json()
        batch_size = int(request.get("batch_size", OUTPUTS_PER_RESUME))
        if batch_size < 1:
            raise ValueError(f"batch_size deve ser positivo: {batch_size}")
        await handle_interactive_session(websocket, request.get("code", ""), batch_size)
    except WebSocketDisconnect: pass
    except Exception as e:
        try: await websocket.send_json({"type": "error", "message": f"{type(e).__name__}: {e}"})
        except RuntimeError: pass

@app.post("/api/run")
def run_program(request: RunRequest):
    try:
        machine = IntCode(
            parse_program(request.code),
            input_value=request.input_value,
            inputs=request.inputs,
            strict_diagnostics=request.strict_diagnostics,
        )
        last_output = machine.run_to_completion()
        return {
            "success": True,
            "last_output": last_output,
            "outputs": machine.all_outputs(),
            "memory": machine.memory.snapshot(),
            "steps": machine.steps,
        }
    except Exception as e:
        return error_payload(e)

@app.post("/api/disassemble")
def disassemble_program(request: CodeRequest):
    try:
        return {"success": True, "listing": disassemble(parse_program(request.code))}
    except Exception as e:
        return error_payload(e)

@app.post("/api/paint-hull")
def paint_hull(request: PaintRequest):
    try:
        robot = HullRobot({(0, 0): Color(request.start_color)})
        painted = robot.paint_ship(IntCode(parse_program(request.code)))
        return {"success": True, "painted": painted, "image": robot.render().split('\n')}
    except Exception as e:
        return error_payload(e)

@app.get("/api/examples")
async def get_examples():
    return {
        "add": {"name": "Soma na própria memória", "code": "1,0,0,0,99"},
        "multiply": {"name": "Multiplicação", "code": "2,3,0,3,99"},
        "equals_8": {"name": "Entrada igual a 8? (posição)", "code": "3,9,8,9,10,9,4,9,99,-1,8"},
        "quine": {"name": "Quine (base relativa)", "code": "109,1,204,-1,1001,100,1,100,1008,100,16,101,1006,101,0,99"},
        "large_output": {"name": "Saída de 64 bits", "code": "104,1125899906842624,99"},
        "sixteen_digits": {"name": "Produto de 16 dígitos", "code": "1102,34915192,34915192,7,4,7,99,0"},
    }

# --- Configuração do App ---
if not os.path.exists("static"): os.makedirs("static")
app.mount("/", StaticFiles(directory="static", html=True), name="static")
