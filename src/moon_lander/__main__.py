from moon_lander.app import run

run()
