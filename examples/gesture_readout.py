from newtons_cradle.gesture import GestureAnalyzer

# scripted clock: grab at t=0, release at t=1
times = iter([0.0, 1.0])
analyzer = GestureAnalyzer(clock=lambda: next(times))
analyzer.subscribe(lambda r: print(r.format_angle(), "|", r.format_force()))

analyzer.on_drag_start(pointer=(100, 100), body_position=(100, 100))
analyzer.on_drag_end(pointer=(100, 50))
