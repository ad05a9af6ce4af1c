from pydantic import BaseModel, ConfigDict
from typing import Optional


class CourseCreate(BaseModel):
    # id 由資料庫指定，body 內的 id 會被忽略
    # name 可為 null，交給 NOT NULL constraint 擋下 (-> 500)
    name: Optional[str] = None
    url: Optional[str] = None


class CourseOut(BaseModel):
    id: int
    name: str
    url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
