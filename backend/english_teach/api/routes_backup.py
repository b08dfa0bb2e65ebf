from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from ..core.backup import BackupDocument, backup_from_repository, parse_backup, restore_into_repository
from ..core.repository import JsonRepository, get_repository
from .routes_lists import SuccessOut

router = APIRouter(prefix="/backup", tags=["backup"])


@router.get("", response_model=BackupDocument)
def export_backup(repo: JsonRepository = Depends(get_repository)):
    return backup_from_repository(repo)


@router.post("", response_model=SuccessOut)
def import_backup(
    payload: Dict[str, Any] = Body(...),
    repo: JsonRepository = Depends(get_repository),
):
    # parse_backup raises InvalidBackup before anything is written
    doc = parse_backup(payload)
    restore_into_repository(repo, doc)
    return SuccessOut()
