from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='GradeableItem',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('item_type', models.CharField(db_column='itemtype', max_length=30)),
                ('item_module', models.CharField(db_column='itemmodule', db_index=True, max_length=50)),
                ('item_instance', models.BigIntegerField(db_column='iteminstance')),
                ('item_name', models.CharField(db_column='itemname', max_length=255)),
                ('item_sort_order', models.BigIntegerField(db_column='itemsortorder', default=0)),
                ('course_id', models.BigIntegerField(db_column='courseid', db_index=True)),
                ('course_name', models.CharField(db_column='coursename', max_length=255)),
                ('course_module_id', models.BigIntegerField(db_column='coursemoduleid')),
                ('time_modified', models.BigIntegerField(db_column='timemodified', default=0)),
            ],
            options={
                'db_table': 'block_grade_me',
            },
        ),
        migrations.CreateModel(
            name='QuizNeedsGrading',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('attempt_id', models.BigIntegerField(db_column='attemptid', db_index=True)),
                ('user_id', models.BigIntegerField(db_column='userid')),
                ('quiz_id', models.BigIntegerField(db_column='quizid')),
                ('question_attempt_step_id', models.BigIntegerField(db_column='questionattemptstepid')),
                ('course_id', models.BigIntegerField(db_column='courseid', db_index=True)),
            ],
            options={
                'db_table': 'block_grade_me_quiz_ngrade',
            },
        ),
        migrations.AddIndex(
            model_name='gradeableitem',
            index=models.Index(fields=['course_id', 'item_module', 'item_instance'], name='grade_me_item_lookup'),
        ),
        migrations.AddIndex(
            model_name='quizneedsgrading',
            index=models.Index(fields=['quiz_id', 'user_id'], name='grade_me_ngrade_quiz_user'),
        ),
        migrations.AddConstraint(
            model_name='quizneedsgrading',
            constraint=models.UniqueConstraint(
                fields=('attempt_id', 'question_attempt_step_id'), name='grade_me_ngrade_step'
            ),
        ),
    ]
