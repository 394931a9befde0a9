"""Relic-hunting dungeon crawl on a small board."""