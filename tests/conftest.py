import pytest

from liftcore import CarConfig, ElevatorCar, ElevatorSystem


DEMO_TRACE = [
    "floor=0 dir=IDLE door=CLOSED up=[0, 3] down=[] dwell=0",
    "floor=0 dir=UP door=OPEN up=[3, 7] down=[] dwell=2",
    "floor=0 dir=UP door=OPEN up=[3, 7] down=[] dwell=1",
    "floor=0 dir=UP door=CLOSED up=[3, 7] down=[] dwell=0",
    "floor=1 dir=UP door=CLOSED up=[3, 7] down=[] dwell=0",
    "floor=2 dir=UP door=CLOSED up=[3, 7] down=[] dwell=0",
    "floor=3 dir=UP door=CLOSED up=[3, 7] down=[] dwell=0",
    "floor=3 dir=UP door=OPEN up=[7] down=[1] dwell=2",
    "floor=3 dir=UP door=OPEN up=[7] down=[1] dwell=1",
    "floor=3 dir=UP door=CLOSED up=[7] down=[1] dwell=0",
    "floor=4 dir=UP door=CLOSED up=[7] down=[1] dwell=0",
    "floor=5 dir=UP door=CLOSED up=[7] down=[1] dwell=0",
    "floor=6 dir=UP door=CLOSED up=[7] down=[1] dwell=0",
    "floor=7 dir=UP door=CLOSED up=[7] down=[1] dwell=0",
    "floor=7 dir=UP door=OPEN up=[] down=[1] dwell=2",
    "floor=7 dir=UP door=OPEN up=[] down=[1] dwell=1",
    "floor=7 dir=UP door=CLOSED up=[] down=[1] dwell=0",
    "floor=6 dir=DOWN door=CLOSED up=[] down=[1] dwell=0",
    "floor=5 dir=DOWN door=CLOSED up=[] down=[1] dwell=0",
    "floor=4 dir=DOWN door=CLOSED up=[] down=[1] dwell=0",
    "floor=3 dir=DOWN door=CLOSED up=[] down=[1] dwell=0",
    "floor=2 dir=DOWN door=CLOSED up=[] down=[1] dwell=0",
    "floor=1 dir=DOWN door=CLOSED up=[] down=[1] dwell=0",
    "floor=1 dir=DOWN door=OPEN up=[] down=[] dwell=2",
    "floor=1 dir=DOWN door=OPEN up=[] down=[] dwell=1",
    "floor=1 dir=DOWN door=CLOSED up=[] down=[] dwell=0",
    "floor=1 dir=IDLE door=CLOSED up=[] down=[] dwell=0",
    "floor=1 dir=IDLE door=CLOSED up=[] down=[] dwell=0",
    "floor=1 dir=IDLE door=CLOSED up=[] down=[] dwell=0",
    "floor=1 dir=IDLE door=CLOSED up=[] down=[] dwell=0",
]


@pytest.fixture
def demo_trace():
    return list(DEMO_TRACE)


@pytest.fixture
def make_car():
    def _make(num_floors=21, start_floor=0, **options):
        return ElevatorCar(CarConfig(num_floors=num_floors, start_floor=start_floor, **options))

    return _make


@pytest.fixture
def system():
    return ElevatorSystem(21, 0)
