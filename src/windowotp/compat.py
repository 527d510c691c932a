from random import SystemRandom

random = SystemRandom()
