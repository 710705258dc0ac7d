# emptrack/core/schemas.py

"""
모든 도메인 API 스키마가 공유하는 기본 모델입니다.

- 파이썬 코드에서는 snake_case 필드명을 사용하고, JSON에서는 camelCase 별칭을 사용합니다.
- ORM 객체(SQLModel 테이블 인스턴스)로부터 속성을 읽어 응답을 만들 수 있습니다.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,  # snake_case 이름으로도 값 설정 허용
        from_attributes=True,
    )
