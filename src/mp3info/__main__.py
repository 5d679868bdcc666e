from mp3info.cli import main

main()
