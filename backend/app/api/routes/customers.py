# app/api/routes/customers.py
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.crud.customers import create_customer, get_customer, list_customers
from app.schemas.customers import CustomerCreate, CustomerList, CustomerOut

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/customers", tags=["customers"])

# GET /api/customers
@router.get("", response_model=CustomerList)
def customers_list(search: str = Query("", alias="search"), db: Session = Depends(get_db)):
    items = list_customers(db, search=search.strip())
    return {"items": items, "total": len(items)}


# GET /api/customers/{id}
@router.get("/{id}", response_model=CustomerOut)
def customer_detail(id: str, db: Session = Depends(get_db)):
    obj = get_customer(db, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Customer not found")
    return obj


# POST /api/customers
@router.post("", response_model=CustomerOut, status_code=status.HTTP_201_CREATED)
def customer_create(payload: CustomerCreate, db: Session = Depends(get_db)):
    name = (payload.name or "").strip()
    if not name:
        raise HTTPException(status_code=400, detail="Customer name required")
    obj = create_customer(
        db,
        name=name,
        email=(payload.email or "").strip().lower() or None,
        phone=(payload.phone or "").strip() or None,
        company=(payload.company or "").strip() or None,
    )
    logger.info("[customers] created id=%s", obj.id)
    return obj
