from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fittrack.api.goals import router as goals_router
from fittrack.api.achievements import router as achievements_router
from fittrack.api.meals import router as meals_router
from fittrack.api.workouts import router as workouts_router
from fittrack.api.body import sleep_router, weight_router, waist_router
from fittrack.api.notes import router as notes_router
from fittrack.api.settings import router as settings_router
from fittrack.api.reports import router as reports_router
from fittrack.api.export import router as export_router
from fittrack.api.summary import router as summary_router
from fittrack.api.templates import router as templates_router
from fittrack.core.logging_config import setup_logging
from fittrack.db import Base, engine
from fittrack.models import goal, meal, gym_session, body, daily_note, user_settings, workout_template  # noqa: F401  (import ensures tables are registered)


setup_logging()

app = FastAPI(title="FitTrack")

# Allow CORS for local frontend
origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create DB tables on startup
Base.metadata.create_all(bind=engine)

app.include_router(goals_router)
app.include_router(achievements_router)
app.include_router(meals_router)
app.include_router(workouts_router)
app.include_router(sleep_router)
app.include_router(weight_router)
app.include_router(waist_router)
app.include_router(notes_router)
app.include_router(settings_router)
app.include_router(reports_router)
app.include_router(export_router)
app.include_router(templates_router)
app.include_router(summary_router)


@app.get("/")
def root():
    return {"message": "FitTrack backend is running"}
