from fastapi import APIRouter

from farmstead.api.v1.endpoints import auth, contacts, equipment, inventory, metrics, tasks, users, weather

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(tasks.router)
api_router.include_router(inventory.router)
api_router.include_router(equipment.router)
api_router.include_router(contacts.router)
api_router.include_router(weather.router)
api_router.include_router(metrics.router)
