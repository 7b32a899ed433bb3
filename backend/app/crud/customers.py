# app/crud/customers.py
from typing import Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.models.customer import Customer

def get_customer(db: Session, customer_id: str) -> Optional[Customer]:
    if not customer_id:
        return None
    return db.get(Customer, customer_id)

def list_customers(db: Session, *, search: str = "") -> List[Customer]:
    stmt = select(Customer)
    if search:
        stmt = stmt.where(func.lower(Customer.name).like(f"%{search.lower()}%"))
    return db.execute(stmt.order_by(func.lower(Customer.name))).scalars().all()

def customer_names(db: Session) -> Dict[str, str]:
    """{customer_id: name} for every customer, used to label follow-ups."""
    rows = db.execute(select(Customer.id, Customer.name)).all()
    return {r[0]: r[1] for r in rows}

def create_customer(
    db: Session, *, name: str, email: Optional[str] = None, phone: Optional[str] = None, company: Optional[str] = None
) -> Customer:
    obj = Customer(name=name, email=email, phone=phone, company=company)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj
