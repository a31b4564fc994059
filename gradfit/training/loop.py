# gradfit/training/loop.py
from __future__ import annotations

from time import perf_counter
from typing import List

import numpy as np

from gradfit.observability.instrumentation import Instrumentation, NoOpInstrumentation
from gradfit.training.context import TrainingContext
from gradfit.utils.errors import ExecutionError
from gradfit.utils.logger import logs


def solve(ctx: TrainingContext, inst: Instrumentation | NoOpInstrumentation | None = None) -> List[float]:
    """
    Run exactly cfg.iterations cycles of
        forward -> backward -> solver step -> re-bind thetas -> reset

    No early stopping. Any failure aborts the loop and is raised with
    the iteration number; nothing partial is returned.
    """
    inst = inst if inst is not None else NoOpInstrumentation()
    graph, machine, solver = ctx.graph, ctx.machine, ctx.solver
    thetas = ctx.thetas
    iterations = ctx.cfg.iterations
    log_every = ctx.cfg.log_every

    values = np.array([graph.leaf_value(t) for t in thetas], dtype=np.float64)
    last_cost = None

    inst.progress.start(ctx.run_id, iterations)
    start = perf_counter()

    with ctx.exec_ctx.bind():
        for i in range(iterations):
            try:
                machine.run_all()
                grad_map = machine.gradients()
                grads = np.array([grad_map[t.index] for t in thetas], dtype=np.float64)
                last_cost = float(machine.value(ctx.cost))

                values = solver.step(values, grads)
                if not np.all(np.isfinite(values)):
                    raise ExecutionError(f"{solver.name} step produced non-finite parameters: {values}")
            except ExecutionError as e:
                raise ExecutionError(f"error during solve iteration {i}: {e.message}") from e
            except (ArithmeticError, ValueError, TypeError) as e:
                raise ExecutionError(
                    f"error during solve iteration {i}: {type(e).__name__}: {e}"
                ) from e

            for theta, v in zip(thetas, values):
                graph.bind(theta, float(v))

            # intermediate values must not leak into the next iteration
            machine.reset()

            if log_every and (i + 1) % log_every == 0:
                inst.metrics.observe("cost", i + 1, last_cost)
                inst.progress.update(ctx.run_id, i + 1, iterations, cost=last_cost)

    elapsed = perf_counter() - start
    inst.progress.done(ctx.run_id)

    if last_cost is not None:
        ctx.metrics["cost"] = last_cost
        inst.metrics.record("cost", last_cost)
    ctx.metrics["iterations"] = iterations
    ctx.metrics["solve_seconds"] = elapsed
    inst.metrics.record("solve_seconds", elapsed)

    logs.debug(f"[solve] run={ctx.run_id} iterations={iterations} took {elapsed:.4f}s")
    return [float(graph.leaf_value(t)) for t in thetas]
