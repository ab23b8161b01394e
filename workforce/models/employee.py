# workforce/models/employee.py
from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from workforce.database import Base


class Employee(Base):
    __tablename__ = "employees"
    __table_args__ = (
        Index("idx_employees_user_dept", "user_id", "department"),
        Index("idx_employees_dept_position", "department", "position"),
        Index("idx_employees_name", "last_name", "first_name"),
        Index("idx_employees_created_at", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    # One employee record per user; removed together with the user
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    department = Column(String(100), nullable=True, index=True)
    position = Column(String(100), nullable=True, index=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="employee")
