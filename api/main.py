import logging
from typing import Dict, List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException

from api.config import API_HOST, API_PORT, CONTENT_PATH, LOG_LEVEL
from api.schemas import (
    AnalyzeRequest,
    Difficulty,
    ExerciseResponse,
    ReportResponse,
    TutorialResponse,
)
from src.content import load_content
from src.feedback import analyze

logger = logging.getLogger("api")
logging.basicConfig(level=LOG_LEVEL)

app = FastAPI(title="Code Learning Assistant")
store = load_content(CONTENT_PATH)


@app.get("/")
async def root() -> Dict[str, str]:
    """Return a simple message indicating the API is running."""
    return {"message": "Code Learning Assistant API is running"}


@app.post("/analyze", response_model=ReportResponse)
async def analyze_code(req: AnalyzeRequest) -> ReportResponse:
    """Run the feedback engine over ``req.code``."""
    try:
        report = analyze(req.code)
    except Exception as exc:  # pragma: no cover - defensive
        logger.exception("Error while analysing code")
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    logger.info("Analysis finished: ok=%s", report.ok)
    return ReportResponse.from_report(report)


@app.get("/exercises", response_model=List[ExerciseResponse])
async def list_exercises(difficulty: Optional[Difficulty] = None) -> List[ExerciseResponse]:
    """List exercises, optionally filtered by difficulty tier."""
    exercises = store.by_difficulty(difficulty) if difficulty else store.exercises
    return [ExerciseResponse.from_descriptor(ex) for ex in exercises]


@app.get("/exercises/{exercise_id}", response_model=ExerciseResponse)
async def get_exercise(exercise_id: int) -> ExerciseResponse:
    try:
        exercise = store.get_exercise(exercise_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=f"Exercise {exercise_id} not found") from exc
    return ExerciseResponse.from_descriptor(exercise)


@app.get("/tutorials", response_model=List[TutorialResponse])
async def list_tutorials() -> List[TutorialResponse]:
    return [TutorialResponse.from_descriptor(tut) for tut in store.tutorials]


@app.get("/tutorials/{index}", response_model=TutorialResponse)
async def get_tutorial(index: int) -> TutorialResponse:
    try:
        tutorial = store.get_tutorial(index)
    except IndexError as exc:
        raise HTTPException(status_code=404, detail=f"Tutorial {index} not found") from exc
    return TutorialResponse.from_descriptor(tutorial)


if __name__ == "__main__":
    uvicorn.run(app, host=API_HOST, port=API_PORT, log_level=LOG_LEVEL.lower())
