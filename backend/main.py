"""FastAPI application for the alignment visualizer."""
import math
from pathlib import Path
from fastapi import FastAPI, HTTPException, WebSocket
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse
from schemas import AlignmentView, ColorTable, RenderRequest
from colors import DEFAULT_COLOR, class_table, color_table
from layout import row_capacity
from alignment import render_alignment
from session import AlignmentSession

app = FastAPI(title="Alignment Visualizer", version="1.0")

# Serve frontend
FRONTEND_DIR = Path(__file__).parent.parent / "frontend"

app.mount("/static", StaticFiles(directory=FRONTEND_DIR), name="static")

@app.get("/")
async def index():
    return FileResponse(FRONTEND_DIR / "index.html")

# --- Color endpoints ---

@app.get("/api/colors")
async def get_colors() -> ColorTable:
    """Residue color table used by the renderer."""
    return ColorTable(colors=color_table(), classes=class_table(), default=DEFAULT_COLOR)

# --- Alignment endpoints ---

@app.post("/api/render")
async def render(request: RenderRequest) -> AlignmentView:
    """Render two aligned sequences for a container of the given width."""
    if request.width is None:
        capacity = None
    elif not math.isfinite(request.width):
        raise HTTPException(status_code=422, detail="width must be a finite number")
    else:
        capacity = row_capacity(request.width)
    return render_alignment(request.seq1, request.seq2, capacity)

@app.websocket("/ws/alignment")
async def alignment_session(websocket: WebSocket):
    """Live view: re-rendered on every resize, copies selections on request."""
    await AlignmentSession(websocket).run()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
