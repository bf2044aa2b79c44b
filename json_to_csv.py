import argparse
import json
import os

import pandas as pd


def join_list(values):
    """Join a list field into a comma-separated cell"""
    if not values:
        return ""
    if isinstance(values, str):
        return values
    return ",".join(str(v) for v in values)


def flatten_projects(projects):
    rows = []
    for project in projects:
        rows.append({
            'id': project.get('id', project.get('project_id')),
            'title': project.get('title', ''),
            'required_skills': join_list(project.get('required_skills', project.get('skills_required'))),
            'budget': project.get('budget', 0),
            'duration_days': project.get('duration_days', project.get('duration', 0)),
            'team_size': project.get('team_size')
        })
    return rows


def flatten_freelancers(freelancers):
    rows = []
    for freelancer in freelancers:
        row = dict(freelancer)
        row['skills'] = join_list(freelancer.get('skills'))
        rows.append(row)
    return rows


def flatten_teams(teams):
    rows = []
    for team in teams:
        rows.append({
            'id': team.get('id', team.get('team_id')),
            'name': team.get('name', ''),
            'member_ids': join_list(team.get('member_ids', team.get('members')))
        })
    return rows


def convert_json_to_csv(json_file, output_dir):
    """Write projects.csv, freelancers.csv, teams.csv and reviews.csv"""
    with open(json_file, 'r') as f:
        data = json.load(f)

    os.makedirs(output_dir, exist_ok=True)

    sections = {
        'projects.csv': flatten_projects(data.get('projects', [])),
        'freelancers.csv': flatten_freelancers(data.get('freelancers', [])),
        'teams.csv': flatten_teams(data.get('teams', [])),
        'reviews.csv': data.get('reviews', [])
    }

    for file_name, rows in sections.items():
        if not rows:
            continue
        path = os.path.join(output_dir, file_name)
        pd.DataFrame(rows).to_csv(path, index=False)
        print(f"Wrote {len(rows)} rows to {path}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Convert a matching data JSON file to CSV files")
    parser.add_argument("json_file", help="Path to the JSON data file")
    parser.add_argument("output_dir", help="Directory to write the CSV files to")
    args = parser.parse_args()

    convert_json_to_csv(args.json_file, args.output_dir)
