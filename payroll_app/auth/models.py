# payroll_app/auth/models.py

from sqlalchemy import Column, Integer, String, DateTime, func
from payroll_app.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), nullable=False, unique=True)
    # werkzeug hash for accounts created through /register; older rows hold plaintext
    password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="employee")   # admin / employee
    created_at = Column(DateTime, server_default=func.now())

    def __repr__(self):
        return f"<User id={self.id} username={self.username} role={self.role}>"
