from . import DepthStepper, FrameClock, RecordingSink, create_generator, koch_snowflake, symmetric_tree

DEMOS = (
    ("koch", koch_snowflake(max_depth=3, draw_every_n_ticks=2)),
    ("symmetric", symmetric_tree(child_count=3, min_segment_size=6.0, draw_every_n_ticks=1)),
)


def run():
    clock = FrameClock()
    for family, params in DEMOS:
        sink = RecordingSink()
        stepper = DepthStepper(sink, (400, 400), lambda status: print(f"  {status.message}"))
        print(f"{family}: {params}")
        stepper.start(create_generator(family, params))
        clock.subscribe(stepper.tick)
        while stepper.running:
            clock.advance()
        clock.unsubscribe(stepper.tick)
        print(f"  {sink.replace_count} frame(s), {len(sink.current)} element(s) on screen\n")


if __name__ == "__main__":
    run()
