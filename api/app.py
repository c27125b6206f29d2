from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from cueline import config
from cueline.hints import local_hint
from cueline.logging_config import get_logger
from cueline.pipeline import evaluate_line
from cueline.scorer import evaluate_line_locally, pick_best_alternative, word_similarity
from cueline.structure import is_chunkable, needs_punctuation_tip, split_into_chunks

logger = get_logger("api")

app = FastAPI(title="CueLine Line Matching Service")

# --- Remote evaluator ---
# Built once at startup; None means local evaluation only
remote_evaluator = config.build_remote_evaluator()
if remote_evaluator is None:
    logger.info("No CUELINE_REMOTE_URL set, serving local evaluation only.")
else:
    logger.info("Remote evaluator configured at %s", config.REMOTE_URL)


# --- Data Models ---
class EvaluateRequest(BaseModel):
    spokenText: str
    correctText: str
    character: str = ""
    context: str = ""
    alternatives: Optional[List[str]] = None

class CompareRequest(BaseModel):
    spokenText: str
    correctText: str

class AlternativesRequest(BaseModel):
    alternatives: List[str]
    correctText: str

class ChunkRequest(BaseModel):
    text: str

class HintRequest(BaseModel):
    correctText: str
    hintLevel: int

# --- Endpoints ---

@app.get("/health")
def health_check():
    return {"status": "ok", "remote_evaluator": remote_evaluator is not None}

@app.post("/evaluate")
def evaluate(req: EvaluateRequest):
    """
    Evaluate an attempt: local pre-screen, remote evaluator when inconclusive.
    """
    result = evaluate_line(
        req.spokenText,
        req.correctText,
        character=req.character,
        context=req.context,
        alternatives=req.alternatives,
        remote=remote_evaluator,
        confident_pass=config.CONFIDENT_PASS,
    )
    return result.to_dict()

@app.post("/evaluate/local")
def evaluate_local(req: CompareRequest):
    return evaluate_line_locally(req.spokenText, req.correctText).to_dict()

@app.post("/similarity")
def similarity(req: CompareRequest):
    return {"similarity": word_similarity(req.spokenText, req.correctText)}

@app.post("/best-alternative")
def best_alternative(req: AlternativesRequest):
    try:
        best = pick_best_alternative(req.alternatives, req.correctText)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"best": best, "similarity": word_similarity(best, req.correctText)}

@app.post("/chunks")
def chunks(req: ChunkRequest):
    return {
        "chunks": split_into_chunks(req.text),
        "chunkable": is_chunkable(req.text),
        "needsPunctuationTip": needs_punctuation_tip(req.text),
    }

@app.post("/hint")
def hint(req: HintRequest):
    try:
        return {"hint": local_hint(req.correctText, req.hintLevel)}
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
