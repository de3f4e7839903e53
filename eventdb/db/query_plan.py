# eventdb/db/query_plan.py
from sqlalchemy.orm import Session


def explain(db: Session, statement) -> list[str]:
    """
    Returns the engine's query plan for a SELECT, one line per plan step.

    Only the shape of the plan is of interest, so on SQLite the bound
    parameters are passed as NULL.
    """
    dialect = db.get_bind().dialect
    compiled = statement.compile(
        dialect=dialect, compile_kwargs={"render_postcompile": True}
    )

    if dialect.name == "sqlite":
        params = tuple(None for _ in compiled.positiontup or ())
        rows = db.connection().exec_driver_sql(
            f"EXPLAIN QUERY PLAN {compiled}", params
        ).all()
        # (id, parent, notused, detail)
        return [row[-1] for row in rows]

    if compiled.positiontup is not None:
        params = tuple(compiled.params[name] for name in compiled.positiontup)
    else:
        params = compiled.params
    rows = db.connection().exec_driver_sql(f"EXPLAIN {compiled}", params).all()
    return [row[0] for row in rows]


def uses_index(plan: list[str], table: str) -> bool:
    """True when the plan reaches ``table`` through an index search, not a scan."""
    for line in plan:
        step = line.strip().lstrip("-> ")
        if step.startswith(f"SCAN {table}") or step.startswith(f"Seq Scan on {table}"):
            return False
    return any("INDEX" in line.upper() for line in plan)
