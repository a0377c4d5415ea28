from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Dict, Any
import asyncio
import os
import logging
from dotenv import load_dotenv

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

from services.formio_endpoint import FormioEndpoint
from services.gravity_forms_client import GravityFormsClient, GravityFormsError

# Load environment variables
load_dotenv()

# Initialize services
gravity_forms_client = GravityFormsClient()
formio_endpoint = FormioEndpoint(gravity_forms_client)

# Lifespan event handler
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Report the Gravity Forms connection on startup and release it on shutdown"""
    logger.info("Starting up Gravity Forms form.io bridge...")
    if gravity_forms_client.is_available():
        logger.info(f"Using Gravity Forms at: {gravity_forms_client.base_url}")
    else:
        logger.warning("GRAVITY_FORMS_URL not configured; form endpoints will report Gravity Forms as not installed")

    yield

    logger.info("Shutting down Gravity Forms form.io bridge...")
    gravity_forms_client.session.close()

app = FastAPI(
    title="Gravity Forms form.io Bridge",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
default_origins = "http://localhost:5173,http://localhost:3000,http://localhost:8000"
allowed_origins = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", default_origins).split(",")
    if origin.strip()
]

logger.info(f"CORS enabled for origins: {allowed_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    max_age=3600,
)


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


# ============================================================================
# FORM.IO ENDPOINTS
# ============================================================================

@app.get("/owc/v1/gf-formio/{form_id}")
async def gf_to_formio(form_id: int) -> Dict[str, Any]:
    """Get a Gravity Form translated to a form.io form"""
    try:
        return await asyncio.to_thread(formio_endpoint.gf_to_formio, {"id": form_id})
    except GravityFormsError as e:
        logger.error(f"Gravity Forms error for form {form_id}: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        logger.error(f"Error translating form {form_id}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Form translation failed: {str(e)}")


@app.post("/owc/v1/gf-formio/{form_id}")
async def formio_post(form_id: int, request: Request) -> Dict[str, Any]:
    """Post a form.io submission and let Gravity Forms handle it"""
    body = await request.body()
    try:
        return await asyncio.to_thread(formio_endpoint.formio_post, {"id": form_id, "body": body})
    except GravityFormsError as e:
        logger.error(f"Gravity Forms error for form {form_id}: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        logger.error(f"Error submitting form {form_id}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Form submission failed: {str(e)}")


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
