from fastapi import APIRouter, Request
from sqlalchemy.exc import SQLAlchemyError

router = APIRouter()


@router.get("")
def health_check(request: Request):
    health_status = {"status": "healthy", "database": "healthy"}

    try:
        request.app.state.database.ping()
    except SQLAlchemyError as e:
        health_status["database"] = f"error: {str(e)}"
        health_status["status"] = "unhealthy"

    return health_status
