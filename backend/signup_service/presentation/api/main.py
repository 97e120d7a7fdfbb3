from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from signup_service.core.di.service_locator import ServiceLocator
from signup_service.presentation.api.v1.signup_router import router as signup_router


app = FastAPI(title="Signup Service", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ServiceLocator.config().cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def root():
    return {"status": "ok", "message": "Signup Service running"}


app.include_router(signup_router)
