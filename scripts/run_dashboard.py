import uvicorn
import logging

from dashboard.core.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="[%(levelname)s] %(name)s: %(message)s")
    print(f"Starting dashboard on http://{settings.HOST}:{settings.PORT} (classifier: {settings.CLASSIFIER_URL})...")
    # reload=True for dev convenience
    uvicorn.run(
        "dashboard.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
        reload=settings.DEBUG,
    )
