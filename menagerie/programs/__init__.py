from .demo import PROGRAMS, run_polymorphic_animal_funcs, basic, with_helper, interface
