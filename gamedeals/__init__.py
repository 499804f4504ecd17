"""
Game deals backend.

  gamedeals/logic/   : validation, reconciliation and the CheapShark fetch pipeline.
  gamedeals/routers/ : FastAPI routes; translate domain errors into HTTP responses.
  gamedeals/models/  : SQLModel table and pydantic request/response models.
"""
