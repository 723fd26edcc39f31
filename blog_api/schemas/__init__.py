from .common import (
	CamelModel,
	SuccessResponse,
	MessageResponse,
)
from .user import (
	UserBase,
	UserCreate,
	UserUpdate,
	UserResponse,
)
from .category import (
	CategoryBase,
	CategoryCreate,
	CategoryUpdate,
	CategoryResponse,
)
from .post import (
	PostBase,
	PostCreate,
	PostUpdate,
	PostResponse,
)
from .auth import (
	LoginRequest,
	TokenResponse,
	IdentityResponse,
)
