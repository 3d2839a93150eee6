from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from farmstead.core.deps import CurrentUser, StorageDep
from farmstead.models.farm import InventoryItem
from farmstead.schemas.inventory import (
    InventoryItemCreate,
    InventoryItemRead,
    InventoryItemUpdate,
    InventoryStatus,
)
from farmstead.storage import Storage

router = APIRouter(prefix="/inventory", tags=["inventory"])


async def _get_owned_item(storage: Storage, item_id: int, user_id: int) -> InventoryItem:
    item = await storage.get_inventory_item(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Inventory item not found")
    if item.user_id != user_id:
        raise HTTPException(status_code=403, detail="Not your inventory item")
    return item


@router.get("", response_model=list[InventoryItemRead])
async def list_inventory(
    current_user: CurrentUser,
    storage: StorageDep,
    status_filter: Optional[InventoryStatus] = Query(None, alias="status"),
):
    items = await storage.list_inventory_items(current_user.id)
    if status_filter is not None:
        items = [i for i in items if i.status == status_filter]
    return items


@router.post("", response_model=InventoryItemRead, status_code=status.HTTP_201_CREATED)
async def create_inventory_item(data: InventoryItemCreate, current_user: CurrentUser, storage: StorageDep):
    return await storage.create_inventory_item(current_user.id, data)


@router.get("/{item_id}", response_model=InventoryItemRead)
async def get_inventory_item(item_id: int, current_user: CurrentUser, storage: StorageDep):
    return await _get_owned_item(storage, item_id, current_user.id)


@router.patch("/{item_id}", response_model=InventoryItemRead)
async def update_inventory_item(
    item_id: int, data: InventoryItemUpdate, current_user: CurrentUser, storage: StorageDep
):
    await _get_owned_item(storage, item_id, current_user.id)
    item = await storage.update_inventory_item(item_id, data)
    if item is None:
        raise HTTPException(status_code=404, detail="Inventory item not found")
    return item


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_inventory_item(item_id: int, current_user: CurrentUser, storage: StorageDep):
    await _get_owned_item(storage, item_id, current_user.id)
    await storage.delete_inventory_item(item_id)
