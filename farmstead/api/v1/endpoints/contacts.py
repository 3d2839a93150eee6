from fastapi import APIRouter, HTTPException, status

from farmstead.core.deps import CurrentUser, StorageDep
from farmstead.models.farm import Contact
from farmstead.schemas.contact import ContactCreate, ContactRead, ContactUpdate
from farmstead.storage import Storage

router = APIRouter(prefix="/contacts", tags=["contacts"])


async def _get_owned_contact(storage: Storage, contact_id: int, user_id: int) -> Contact:
    contact = await storage.get_contact(contact_id)
    if contact is None:
        raise HTTPException(status_code=404, detail="Contact not found")
    if contact.user_id != user_id:
        raise HTTPException(status_code=403, detail="Not your contact")
    return contact


@router.get("", response_model=list[ContactRead])
async def list_contacts(current_user: CurrentUser, storage: StorageDep):
    return await storage.list_contacts(current_user.id)


@router.post("", response_model=ContactRead, status_code=status.HTTP_201_CREATED)
async def create_contact(data: ContactCreate, current_user: CurrentUser, storage: StorageDep):
    return await storage.create_contact(current_user.id, data)


@router.get("/{contact_id}", response_model=ContactRead)
async def get_contact(contact_id: int, current_user: CurrentUser, storage: StorageDep):
    return await _get_owned_contact(storage, contact_id, current_user.id)


@router.patch("/{contact_id}", response_model=ContactRead)
async def update_contact(contact_id: int, data: ContactUpdate, current_user: CurrentUser, storage: StorageDep):
    await _get_owned_contact(storage, contact_id, current_user.id)
    contact = await storage.update_contact(contact_id, data)
    if contact is None:
        raise HTTPException(status_code=404, detail="Contact not found")
    return contact


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact(contact_id: int, current_user: CurrentUser, storage: StorageDep):
    await _get_owned_contact(storage, contact_id, current_user.id)
    await storage.delete_contact(contact_id)
