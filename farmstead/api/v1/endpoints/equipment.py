from fastapi import APIRouter, HTTPException, status

from farmstead.core.deps import CurrentUser, StorageDep
from farmstead.models.farm import EquipmentItem
from farmstead.schemas.equipment import EquipmentItemCreate, EquipmentItemRead, EquipmentItemUpdate
from farmstead.storage import Storage

router = APIRouter(prefix="/equipment", tags=["equipment"])


async def _get_owned_item(storage: Storage, item_id: int, user_id: int) -> EquipmentItem:
    item = await storage.get_equipment_item(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Equipment item not found")
    if item.user_id != user_id:
        raise HTTPException(status_code=403, detail="Not your equipment")
    return item


@router.get("", response_model=list[EquipmentItemRead])
async def list_equipment(current_user: CurrentUser, storage: StorageDep):
    return await storage.list_equipment_items(current_user.id)


@router.post("", response_model=EquipmentItemRead, status_code=status.HTTP_201_CREATED)
async def create_equipment_item(data: EquipmentItemCreate, current_user: CurrentUser, storage: StorageDep):
    return await storage.create_equipment_item(current_user.id, data)


@router.get("/{item_id}", response_model=EquipmentItemRead)
async def get_equipment_item(item_id: int, current_user: CurrentUser, storage: StorageDep):
    return await _get_owned_item(storage, item_id, current_user.id)


@router.patch("/{item_id}", response_model=EquipmentItemRead)
async def update_equipment_item(
    item_id: int, data: EquipmentItemUpdate, current_user: CurrentUser, storage: StorageDep
):
    await _get_owned_item(storage, item_id, current_user.id)
    item = await storage.update_equipment_item(item_id, data)
    if item is None:
        raise HTTPException(status_code=404, detail="Equipment item not found")
    return item


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_equipment_item(item_id: int, current_user: CurrentUser, storage: StorageDep):
    await _get_owned_item(storage, item_id, current_user.id)
    await storage.delete_equipment_item(item_id)
