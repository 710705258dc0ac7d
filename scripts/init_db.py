# scripts/init_db.py

import asyncio
from typing import List, Optional

import typer

from emptrack.core.config import settings
from emptrack.core.database import Database
from emptrack.core.logging import setup_logging
from emptrack.domains.org import crud as org_crud
from emptrack.domains.org import schemas as org_schemas

cli = typer.Typer()


async def seed_departments(db_client: Database, names: List[str]) -> List[str]:
    """
    이름이 같은 부서가 없을 때만 부서를 생성하고, 새로 생성된 부서명 목록을 반환합니다.
    """
    created = []
    async with db_client.session() as db:
        for name in names:
            if await org_crud.department.get_by_attribute(db, attribute="name", value=name):
                typer.echo(f"이미 존재하는 부서입니다: {name}")
                continue
            await org_crud.department.create(db, obj_in=org_schemas.DepartmentCreate(name=name))
            created.append(name)
    return created


async def run_init(names: List[str]) -> List[str]:
    db_client = Database(settings)
    try:
        await db_client.create_db_and_tables()
        return await seed_departments(db_client, names)
    finally:
        await db_client.dispose()


@cli.command()
def main(
    department: Optional[List[str]] = typer.Option(
        None, '--department', '-d',
        help="생성할 부서명입니다. 여러 번 지정할 수 있습니다."
    ),
):
    """
    데이터베이스 테이블을 생성하고, 지정된 부서를 초기 데이터로 추가합니다.
    """
    setup_logging(settings.LOG_LEVEL, debug=settings.DEBUG_MODE)
    typer.echo("데이터베이스 스키마 동기화를 시작합니다...")

    created = asyncio.run(run_init(department or []))

    typer.echo(f"완료되었습니다. 새로 생성된 부서: {len(created)}개")
    for name in created:
        typer.echo(f"  - {name}")


if __name__ == "__main__":
    cli()
