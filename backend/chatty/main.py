import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .deps import close_policy, get_policy
from .settings import settings
from .routers import chat, health
from .routers.health import SERVICE_NAME, SERVICE_VERSION

logging.basicConfig(
	level=settings.log_level.upper(),
	format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("chatty")

app = FastAPI(title=SERVICE_NAME, version=SERVICE_VERSION)
app.add_middleware(
	CORSMiddleware,
	allow_origins=["*"],
	allow_methods=["*"],
	allow_headers=["*"],
)
app.include_router(chat.router)
app.include_router(health.router)


@app.get("/")
def root():
	return {
		"message": f"{SERVICE_NAME} is running!",
		"version": SERVICE_VERSION,
		"status": "operational",
		"endpoints": {
			"chat": "POST /api/chat",
			"health": "GET /health",
			"test": "GET /test",
		},
		"models": list(settings.endpoint_models),
	}


@app.on_event("startup")
async def startup_event():
	policy = await get_policy()
	if not policy.client.configured:
		logger.warning("HF_API_KEY not set; answering from keyword fallback only")
	logger.info("%s running on port %s", SERVICE_NAME, settings.port)
	logger.info("Environment: %s", settings.environment)
	logger.info("Health check: http://localhost:%s/health", settings.port)


@app.on_event("shutdown")
async def shutdown_event():
	await close_policy()


def run() -> None:
	import uvicorn

	uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
	run()
