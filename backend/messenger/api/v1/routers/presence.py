from fastapi import APIRouter, Depends

from messenger.api.v1.deps import CurrentUser, get_current_user, get_state
from messenger.core.state import AppState
from messenger.schemas import OnlineUserOut

router = APIRouter(tags=["presence"])


@router.get("/online-users", response_model=list[OnlineUserOut])
async def online_users(user: CurrentUser = Depends(get_current_user), state: AppState = Depends(get_state)):
    """
    Users that have logged in since the process started, except the caller.
    Nobody is ever marked offline.
    """
    return [OnlineUserOut.from_entry(e) for e in state.presence.list_online_except(user.user_id)]
