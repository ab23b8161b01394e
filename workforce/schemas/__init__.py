from .user import UserRegister, UserLogin, UserOut
from .tokens import AuthResult
from .employee import EmployeeCreate, EmployeeUpdate, EmployeeOut
from .tasks import TaskCreate, TaskUpdate, TaskOut
from .common import MAX_ID, Pagination, FieldError
