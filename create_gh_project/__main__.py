from create_gh_project.cli import main

main()
