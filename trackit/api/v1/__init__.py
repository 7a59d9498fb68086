from .location_controller import router as location_router


__all__ = ["location_router"]
